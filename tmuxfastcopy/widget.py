"""The fastcopy widget: text with hint labels that select matches."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from tmuxfastcopy.hints import Hint, TextAnnotation, generate_hints
from tmuxfastcopy.matches import Match, Selection, Style

HintGenerator = Callable[[Sequence[str], str, Sequence[Match]], list[Hint]]
SelectionHandler = Callable[[Selection], object]


class Key(enum.Enum):
    """Kinds of key press the widget distinguishes."""

    RUNE = "rune"
    BACKSPACE = "backspace"
    BACKSPACE2 = "backspace2"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``rune`` is set for ``Key.RUNE``."""

    key: Key
    rune: str = ""
    shift: bool = False


class Widget:
    """Displays text with prefix-free labels next to each match.

    Typing a full label reports the selection to ``handler``.
    """

    def __init__(
        self,
        text: str,
        matches: Sequence[Match],
        alphabet: Sequence[str],
        handler: SelectionHandler | None = None,
        style: Style | None = None,
        hint_generator: HintGenerator = generate_hints,
    ) -> None:
        self.text = text
        self.style = style if style is not None else Style()
        self.handler = handler
        self.hints = hint_generator(alphabet, text, matches)
        self._hints_by_label = {h.label: h for h in self.hints}
        self._lock = threading.RLock()
        self._input = ""
        self._shift_down = False
        self.annotations: list[TextAnnotation] = []
        self._annotate()

    @property
    def input(self) -> str:
        """Text typed so far towards a label."""
        with self._lock:
            return self._input

    def handle_event(self, event: object) -> bool:
        """Handle a key event; return whether the widget handled it."""
        if not isinstance(event, KeyEvent):
            return False

        if event.key in (Key.BACKSPACE, Key.BACKSPACE2):
            with self._lock:
                changed = bool(self._input)
                if changed:
                    self._input = self._input[:-1]
            if changed:
                self._input_changed()
            return True

        if event.key is Key.RUNE:
            with self._lock:
                char = event.rune
                # An upper-case rune may arrive without the shift flag.
                if char.isupper():
                    char = char.lower()
                    self._shift_down = True
                else:
                    self._shift_down = event.shift
                self._input += char
            self._input_changed()
            return True

        return False

    def _input_changed(self) -> None:
        try:
            with self._lock:
                hint = self._hints_by_label.get(self._input)
                if hint is not None:
                    # Labels are prefix-free, so an exact match is final.
                    self._input = ""
                shift = self._shift_down

            if hint is None or self.handler is None:
                return

            self.handler(
                Selection(
                    text=hint.text,
                    matchers=sorted({m.matcher for m in hint.matches}),
                    shift=shift,
                )
            )
        finally:
            self._annotate()

    def _annotate(self) -> None:
        with self._lock:
            self.annotations = [
                ann
                for hint in self.hints
                for ann in hint.annotations(self._input, self.style)
            ]