"""Contiguous substrings of a digit string."""


def series(digits: str, length: int) -> list[str]:
    """Return every contiguous run of ``length`` characters of ``digits``, in order.

    Returns an empty list when ``length`` exceeds the input; raises
    ValueError when ``length`` is zero.
    """
    if length == 0:
        raise ValueError("length must be positive")
    return [digits[start:start + length] for start in range(len(digits) - length + 1)]