"""Grains of wheat on a chessboard."""

_SQUARES = 64


def square(number: int) -> int:
    """Return the grains on square ``number`` (1 to 64).

    Raises ValueError for any other square.
    """
    if not 1 <= number <= _SQUARES:
        raise ValueError("Square must be between 1 and 64")
    return 2 ** (number - 1)


def total() -> int:
    """Return the grains on the whole board."""
    return sum(square(n) for n in range(1, _SQUARES + 1))