"""Core value types: matched ranges, selections and display styles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Range:
    """The ``[start, end)`` slice of a text."""

    start: int = 0
    end: int = 0

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class Match:
    """A single entry found by a named matcher."""

    matcher: str
    range: Range

    def __str__(self) -> str:
        return f"({json.dumps(self.matcher)}) {self.range}"


@dataclass(frozen=True)
class Style:
    """Display styles used by the widget."""

    normal: Any = None
    match: Any = None
    skipped_match: Any = None
    hint_label: Any = None
    hint_label_input: Any = None


@dataclass
class Selection:
    """A choice made by the user.

    ``matchers`` names every matcher that matched ``text``; ``shift``
    reports whether shift was held while selecting.
    """

    text: str
    matchers: list[str] = field(default_factory=list)
    shift: bool = False