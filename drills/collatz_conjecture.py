"""Steps of the Collatz sequence."""


def collatz(n: int) -> int:
    """Return how many steps it takes ``n`` to reach 1.

    Raises ValueError for numbers below 1.
    """
    if n < 1:
        raise ValueError("only positive integers are allowed")
    steps = 0
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        steps += 1
    return steps