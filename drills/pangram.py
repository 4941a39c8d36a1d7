"""Pangram detection."""

from string import ascii_lowercase

_ALPHABET = frozenset(ascii_lowercase)


def is_pangram(sentence: str) -> bool:
    """Return whether ``sentence`` uses every ASCII letter at least once,
    ignoring case."""
    return _ALPHABET <= {c.lower() for c in sentence if c.isascii()}