"""Lyrics of the green-bottles song."""

_NUMBERS = (
    "No",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
)


def _green_bottles(count: int, *, capitalized: bool) -> str:
    """Return a phrase such as ``"Ten green bottles"`` for ``count`` bottles."""
    if not 0 <= count < len(_NUMBERS):
        raise ValueError(f"Invalid bottle count: {count}")
    number = _NUMBERS[count]
    if not capitalized:
        number = number.lower()
    noun = "bottle" if count == 1 else "bottles"
    return f"{number} green {noun}"


def _verse(count: int) -> str:
    line = f"{_green_bottles(count, capitalized=True)} hanging on the wall,"
    left = _green_bottles(max(count - 1, 0), capitalized=False)
    return (
        f"{line}\n{line}\n"
        "And if one green bottle should accidentally fall,\n"
        f"There'll be {left} hanging on the wall."
    )


def recite(start_bottles: int, take_down: int) -> str:
    """Return ``take_down`` verses starting with ``start_bottles`` bottles.

    Raises ValueError when a verse would need a count outside 0 to 10.
    """
    counts = range(start_bottles, start_bottles - take_down, -1)
    return "\n\n".join(_verse(count) for count in counts)