"""Prime factorisation by trial division."""


def factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats."""
    result = []
    factor = 2
    while n > 1:
        if factor * factor > n:
            result.append(n)
            break
        if n % factor == 0:
            result.append(factor)
            n //= factor
        else:
            factor += 1
    return result