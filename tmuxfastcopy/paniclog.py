"""Logging of unexpected failures, with their stack, to a stream."""

from __future__ import annotations

import traceback
from types import TracebackType
from typing import Any, TextIO


def handle(value: Any, stream: TextIO) -> BaseException | None:
    """Log ``value`` and its stack to ``stream`` and return it as an exception.

    Returns None if ``value`` is None.
    """
    if value is None:
        return None

    if isinstance(value, BaseException) and value.__traceback__ is not None:
        trace = "".join(
            traceback.format_exception(type(value), value, value.__traceback__)
        )
    else:
        trace = "".join(traceback.format_stack())
    stream.write(f"panic: {value}\n{trace}")

    if isinstance(value, BaseException):
        return value
    if isinstance(value, str):
        return RuntimeError(value)
    return RuntimeError(f"panic: {value}")


class Recovery:
    """Context manager that captures an exception, logging it to a stream.

    The captured exception is available as :attr:`error` afterwards.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.error: BaseException | None = None

    def __enter__(self) -> Recovery:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        self.error = handle(exc, self.stream)
        return True


def recover(stream: TextIO) -> Recovery:
    """Return a context manager that captures and logs exceptions."""
    return Recovery(stream)