"""Find the n-th prime number."""

from itertools import takewhile


def nth(n: int) -> int:
    """Return the prime at zero-based position ``n`` (``nth(0) == 2``)."""
    if n < 0:
        raise ValueError("n must not be negative")
    primes = [2]
    candidate = 3
    while len(primes) <= n:
        divisors = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in divisors):
            primes.append(candidate)
        candidate += 2
    return primes[n]