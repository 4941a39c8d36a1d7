"""Convert a number to raindrop sounds."""

_SOUNDS = ((3, "Pling"), (5, "Plang"), (7, "Plong"))


def raindrops(number: int) -> str:
    """Return the raindrop sounds for the factors 3, 5 and 7 of ``number``.

    When none of them divides ``number``, its decimal digits are returned.
    """
    sounds = "".join(sound for factor, sound in _SOUNDS if number % factor == 0)
    return sounds or str(number)