"""Alphabets from which hint labels are built."""

from __future__ import annotations

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_char(char: str) -> str:
    if char in _ESCAPES:
        body = _ESCAPES[char]
    elif char.isprintable():
        body = char
    else:
        code = ord(char)
        if code < 0x80:
            body = f"\\x{code:02x}"
        elif code < 0x10000:
            body = f"\\u{code:04x}"
        else:
            body = f"\\U{code:08x}"
    return f"'{body}'"


def validate_alphabet(alphabet: str) -> str:
    """Return ``alphabet`` if it is usable for labels, or raise ValueError.

    An alphabet needs at least two bytes of text and no repeated characters.
    """
    if len(alphabet.encode("utf-8", errors="surrogatepass")) < 2:
        raise ValueError("alphabet must have at least two items")

    seen: set[str] = set()
    dupes: set[str] = set()
    for char in alphabet:
        if char in seen:
            dupes.add(char)
        seen.add(char)

    if dupes:
        listed = " ".join(_quote_char(c) for c in sorted(dupes))
        raise ValueError(f"alphabet has duplicates: [{listed}]")
    return alphabet