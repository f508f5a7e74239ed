"""Assertions for program invariants."""

from __future__ import annotations

from typing import Any


class InvariantError(AssertionError):
    """Raised when a program invariant is violated."""


def not_errorf(err: BaseException | None, format: str, *args: Any) -> None:
    """Raise :class:`InvariantError` with the given message if ``err`` is set."""
    if err is None:
        return
    detail = format % args if args else format
    raise InvariantError(f"unexpected error: {err}\n{detail}") from err