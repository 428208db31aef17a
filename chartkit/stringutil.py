"""String helpers."""

from __future__ import annotations

_QUOTES = frozenset('"\'\u201c\u201d`')
_PAIRED_QUOTES = {"\u201c": "\u201d", "\u201d": "\u201c"}


def _closes(opened: str, char: str) -> bool:
    return char == opened or _PAIRED_QUOTES.get(opened) == char


def split_csv(text: str) -> list:
    """Split on commas, trimming whitespace around unquoted parts."""
    output = []
    word = []
    opened = None
    for char in text:
        if opened is not None:
            if _closes(opened, char):
                opened = None
            else:
                word.append(char)
        elif char in _QUOTES:
            opened = char
        elif char == ",":
            output.append("".join(word).strip())
            word = []
        else:
            word.append(char)
    if word:
        output.append("".join(word).strip())
    return output