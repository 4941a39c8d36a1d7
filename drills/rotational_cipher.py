"""Caesar-style rotation of ASCII letters."""

from string import ascii_lowercase, ascii_uppercase

_ALPHABET_SIZE = 26


def rotate(text: str, key: int) -> str:
    """Shift every ASCII letter in ``text`` by ``key`` places, wrapping around.

    Other characters are left as they are. ``key`` must be in 0..255.
    """
    if not 0 <= key <= 255:
        raise ValueError("key must be between 0 and 255")
    shift = key % _ALPHABET_SIZE
    table = str.maketrans(
        ascii_lowercase + ascii_uppercase,
        ascii_lowercase[shift:] + ascii_lowercase[:shift]
        + ascii_uppercase[shift:] + ascii_uppercase[:shift],
    )
    return text.translate(table)