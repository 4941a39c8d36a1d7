"""Build acronyms from phrases."""


def _ascii_upper(char: str) -> str:
    return char.upper() if char.isascii() else char


def abbreviate(phrase: str) -> str:
    """Return the acronym of ``phrase``.

    A letter starts a word at the beginning of the phrase, after a hyphen or
    whitespace, or where a lowercase letter is followed by an uppercase one.
    Underscores are ignored entirely.
    """
    chars = [c for c in phrase if c != "_"]
    letters = []
    for prev, c in zip([None, *chars], chars):
        if prev is None:
            if c.isalpha():
                letters.append(_ascii_upper(c))
        elif (prev == "-" or prev.isspace()) and c.isalnum():
            letters.append(_ascii_upper(c))
        elif prev.isascii() and prev.islower() and c.isascii() and c.isupper():
            letters.append(c)
    return "".join(letters)