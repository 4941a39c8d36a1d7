"""Square of sums against sum of squares."""


def square_of_sum(n: int) -> int:
    """Return the square of the sum of 1..n."""
    return sum(range(1, n + 1)) ** 2


def sum_of_squares(n: int) -> int:
    """Return the sum of the squares of 1..n."""
    return sum(x * x for x in range(1, n + 1))


def difference(n: int) -> int:
    """Return square_of_sum(n) minus sum_of_squares(n)."""
    return square_of_sum(n) - sum_of_squares(n)