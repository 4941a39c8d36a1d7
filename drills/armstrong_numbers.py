"""Armstrong number check."""


def is_armstrong_number(number: int) -> bool:
    """Return whether ``number`` equals the sum of its digits each raised to
    the power of the digit count."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = str(number)
    power = len(digits)
    return number == sum(int(d) ** power for d in digits)