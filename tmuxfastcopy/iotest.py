"""Writer that forwards each write to a logging callable."""

from __future__ import annotations

from collections.abc import Callable


class LineLogWriter:
    """File-like object that passes each write, minus one trailing newline, to ``logf``."""

    def __init__(self, logf: Callable[[str], object]) -> None:
        self.logf = logf

    def write(self, data: str | bytes) -> int:
        text = data.decode("utf-8", errors="replace") if isinstance(
            data, (bytes, bytearray)
        ) else data
        self.logf(text.removesuffix("\n"))
        return len(data)