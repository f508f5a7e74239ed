import pytest

from tmuxfastcopy.hints import (
    Hint,
    OverlayTextAnnotation,
    StyleTextAnnotation,
    generate_hints,
)
from tmuxfastcopy.matches import Match, Range, Style

STYLE = Style(
    normal="normal",
    match="green",
    skipped_match="gray",
    hint_label="red",
    hint_label_input="yellow",
)


@pytest.mark.parametrize(
    "text, matches, want",
    [
        ("foo", [], []),
        (
            "foo bar",
            [Match("name", Range(1, 3))],
            [Hint("a", "oo", [Match("name", Range(1, 3))])],
        ),
        (
            "foo bar baz qux",
            [Match("name1", Range(4, 6)), Match("name2", Range(8, 10))],
            [
                Hint(
                    "a",
                    "ba",
                    [Match("name1", Range(4, 6)), Match("name2", Range(8, 10))],
                )
            ],
        ),
        (
            "foo bar baz qux",
            [
                Match("p", Range(0, 3)),
                Match("q", Range(4, 6)),
                Match("r", Range(8, 10)),
                Match("s", Range(13, 15)),
            ],
            [
                Hint("c", "ba", [Match("q", Range(4, 6)), Match("r", Range(8, 10))]),
                Hint("a", "foo", [Match("p", Range(0, 3))]),
                Hint("b", "ux", [Match("s", Range(13, 15))]),
            ],
        ),
    ],
    ids=["no matches", "single match", "duplicated match", "multiple matches"],
)
def test_generate_hints(text, matches, want):
    assert generate_hints("abc", text, matches) == want


@pytest.mark.parametrize(
    "give, input_text, want",
    [
        (
            Hint("a", "foo", [Match("x", Range(0, 3)), Match("y", Range(7, 10))]),
            "",
            [
                OverlayTextAnnotation(0, "a", STYLE.hint_label),
                StyleTextAnnotation(1, 2, STYLE.match),
                OverlayTextAnnotation(7, "a", STYLE.hint_label),
                StyleTextAnnotation(8, 2, STYLE.match),
            ],
        ),
        (
            Hint("a", "foo", [Match("x", Range(0, 3))]),
            "a",
            [
                OverlayTextAnnotation(0, "a", STYLE.hint_label_input),
                StyleTextAnnotation(1, 2, STYLE.match),
            ],
        ),
        (
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "",
            [
                OverlayTextAnnotation(1, "ab", STYLE.hint_label),
                StyleTextAnnotation(3, 4, STYLE.match),
            ],
        ),
        (
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "a",
            [
                OverlayTextAnnotation(1, "a", STYLE.hint_label_input),
                OverlayTextAnnotation(2, "b", STYLE.hint_label),
                StyleTextAnnotation(3, 4, STYLE.match),
            ],
        ),
        (
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "x",
            [StyleTextAnnotation(1, 6, STYLE.skipped_match)],
        ),
        (
            Hint("abcd", "foo", [Match("x", Range(0, 3))]),
            "",
            [OverlayTextAnnotation(0, "abcd", STYLE.hint_label)],
        ),
    ],
    ids=[
        "multiple matches",
        "full input match",
        "multi character label",
        "input match",
        "input mismatch",
        "long label",
    ],
)
def test_hint_annotations(give, input_text, want):
    assert give.annotations(input_text, STYLE) == want


def test_generate_hints_labels_are_prefix_free():
    text = "aa bb cc dd ee ff"
    matches = [Match("m", Range(i, i + 2)) for i in range(0, len(text), 3)]
    labels = [h.label for h in generate_hints("ab", text, matches)]
    assert len(set(labels)) == 6
    for left in labels:
        for right in labels:
            if left != right:
                assert not left.startswith(right)