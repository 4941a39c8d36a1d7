"""The 'for want of a nail' proverb."""

from collections.abc import Sequence


def build_proverb(words: Sequence[str]) -> str:
    """Return the proverb built from the chain of ``words``."""
    if not words:
        return ""
    words = list(words)
    lines = [
        f"For want of a {cause} the {effect} was lost.\n"
        for cause, effect in zip(words, words[1:])
    ]
    lines.append(f"And all for the want of a {words[0]}.")
    return "".join(lines)