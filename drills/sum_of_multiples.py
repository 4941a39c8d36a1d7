"""Sum of the multiples of given factors below a limit."""

from collections.abc import Iterable


def sum_of_multiples(limit: int, factors: Iterable[int]) -> int:
    """Return the sum of the numbers in 1..limit-1 divisible by any non-zero factor."""
    divisors = [f for f in factors if f > 0]
    return sum(n for n in range(1, limit) if any(n % d == 0 for d in divisors))