"""Helper for building brace-delimited string forms of objects."""

from __future__ import annotations

from numbers import Number
from typing import Any


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return not value
    if isinstance(value, Number):
        return value == 0
    return False


class Builder:
    """Collects ``name: value`` attributes, skipping zero values."""

    def __init__(self) -> None:
        self._attrs: list[str] = []

    def put(self, name: str, value: Any) -> None:
        """Add an attribute unless its value is None, empty text or zero."""
        if _is_zero(value):
            return
        self._attrs.append(f"{name}: {value}")

    def __str__(self) -> str:
        return "{" + ", ".join(sorted(self._attrs)) + "}"