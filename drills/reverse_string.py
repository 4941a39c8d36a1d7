"""Reverse text by user-perceived characters."""

import regex

_GRAPHEME = regex.compile(r"\X")


def reverse(text: str) -> str:
    """Return ``text`` reversed, keeping grapheme clusters intact."""
    return "".join(reversed(_GRAPHEME.findall(text)))