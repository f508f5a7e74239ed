"""Leveled, user-facing logging safe for concurrent use."""

from __future__ import annotations

import codecs
import copy
import enum
import threading
from typing import Any, TextIO


class Level(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = -1
    INFO = 0
    ERROR = 1
    DISCARD = 2

    def __str__(self) -> str:
        if self is Level.DISCARD:
            return str(int(self))
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class _LockedStream:
    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        with self._lock:
            self._stream.write(text)


class _NullStream:
    def write(self, text: str) -> int:
        return len(text)


class Logger:
    """Writes leveled messages to a text stream.

    Copies made by :meth:`with_name` and :meth:`with_level` share the
    underlying stream and its lock.
    """

    def __init__(self, stream: TextIO) -> None:
        self._out = _LockedStream(stream)
        self.name = ""
        self.level = Level.INFO

    def with_name(self, name: str) -> Logger:
        """Return a logger that prefixes messages with ``[name]``."""
        out = copy.copy(self)
        out.name = name
        return out

    def with_level(self, level: Level) -> Logger:
        """Return a logger that logs messages of ``level`` or higher."""
        out = copy.copy(self)
        out.level = Level(level)
        return out

    def debug(self, msg: str, *args: Any) -> None:
        self.log(Level.DEBUG, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self.log(Level.INFO, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.log(Level.ERROR, msg, *args)

    def log(self, level: Level, msg: str, *args: Any) -> None:
        """Log ``msg % args`` at ``level``, ending it with exactly one newline."""
        if level < self.level:
            return

        prefix = f"[{self.name}] " if self.name else ""
        msg = msg.rstrip()
        if args:
            msg = msg % args
        self._out.write(f"{prefix}{msg}\n")


DISCARD = Logger(_NullStream()).with_level(Level.DISCARD)


class LogWriter:
    """File-like object that turns each written line into a log entry."""

    def __init__(self, log: Logger, level: Level = Level.INFO) -> None:
        self.log = log
        self.level = level
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def write(self, data: str | bytes) -> int:
        """Buffer ``data`` and log every complete line in it."""
        if isinstance(data, (bytes, bytearray)):
            text = self._decoder.decode(bytes(data))
        else:
            text = data
        while text:
            text = self._take_next_line(text)
        return len(data)

    def _take_next_line(self, text: str) -> str:
        line, newline, remaining = text.partition("\n")
        if not newline:
            self._pending += line
            return ""

        if not self._pending:
            self._log_line(line)
            return remaining

        self._pending += line
        # Keep empty lines in the middle of the stream.
        self._flush(allow_empty=True)
        return remaining

    def close(self) -> None:
        """Log whatever partial line is still buffered."""
        tail = self._decoder.decode(b"", final=True)
        if tail:
            self._pending += tail
        # No empty message at the end: streams commonly end with a newline.
        self._flush(allow_empty=False)

    def _flush(self, allow_empty: bool) -> None:
        if allow_empty or self._pending:
            self._log_line(self._pending)
        self._pending = ""

    def _log_line(self, line: str) -> None:
        self.log.log(self.level, "%s", line)

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()