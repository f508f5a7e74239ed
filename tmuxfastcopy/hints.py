"""Hint labels for matched text and the annotations that display them."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from tmuxfastcopy.huffman import label as huffman_label
from tmuxfastcopy.matches import Match, Style


@dataclass(frozen=True)
class OverlayTextAnnotation:
    """Draws ``overlay`` over the text starting at ``offset``."""

    offset: int
    overlay: str
    style: Any = None


@dataclass(frozen=True)
class StyleTextAnnotation:
    """Applies ``style`` to ``length`` characters starting at ``offset``."""

    offset: int
    length: int
    style: Any = None


TextAnnotation = Union[OverlayTextAnnotation, StyleTextAnnotation]


@dataclass
class Hint:
    """A label that selects every occurrence of a matched text."""

    label: str
    text: str
    matches: list[Match] = field(default_factory=list)

    def annotations(self, input_text: str, style: Style) -> list[TextAnnotation]:
        """Build the annotations that display this hint given the typed input."""
        matched = self.label.startswith(input_text)
        match_style = style.match if matched else style.skipped_match

        anns: list[TextAnnotation] = []
        for match in self.matches:
            start, end = match.range.start, match.range.end
            if matched:
                typed = len(input_text)
                if input_text:
                    anns.append(
                        OverlayTextAnnotation(
                            offset=start,
                            overlay=input_text,
                            style=style.hint_label_input,
                        )
                    )
                if typed < len(self.label):
                    anns.append(
                        OverlayTextAnnotation(
                            offset=start + typed,
                            overlay=self.label[typed:],
                            style=style.hint_label,
                        )
                    )
                start += len(self.label)

            # The label may be longer than the matched text.
            if end > start:
                anns.append(
                    StyleTextAnnotation(offset=start, length=end - start, style=match_style)
                )
        return anns


def generate_hints(
    alphabet: Sequence[str], text: str, matches: Sequence[Match]
) -> list[Hint]:
    """Generate hints with unique prefix-free labels for the matches in ``text``.

    Matches of the same text share a hint; more frequent texts get shorter labels.
    """
    by_text: dict[str, list[Match]] = defaultdict(list)
    for m in matches:
        by_text[text[m.range.start : m.range.end]].append(m)

    unique = sorted(by_text)
    freqs = [len(by_text[t]) for t in unique]
    labels = huffman_label(len(alphabet), freqs)
    return [
        Hint(
            label="".join(alphabet[i] for i in indexes),
            text=t,
            matches=by_text[t],
        )
        for t, indexes in zip(unique, labels)
    ]