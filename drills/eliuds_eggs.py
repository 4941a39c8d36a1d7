"""Count eggs shown by a coop's display value."""


def egg_count(display_value: int) -> int:
    """Return the number of set bits in ``display_value``."""
    if display_value < 0:
        raise ValueError("display value must not be negative")
    return bin(display_value).count("1")