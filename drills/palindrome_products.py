"""Smallest and largest palindromic products of factors in a range."""

from collections.abc import Iterable
from dataclasses import dataclass
from math import isqrt
from typing import Optional


@dataclass(frozen=True)
class Palindrome:
    """A palindromic product and every factor pair in range that makes it."""

    value: int
    factors: frozenset[tuple[int, int]]


def _is_palindrome(n: int) -> bool:
    digits = str(n)
    return digits == digits[::-1]


def _factor_pairs(n: int, min_factor: int, max_factor: int) -> frozenset[tuple[int, int]]:
    upper = min(max_factor, isqrt(n))
    return frozenset(
        (x, n // x)
        for x in range(min_factor, upper + 1)
        if n % x == 0 and min_factor <= n // x <= max_factor
    )


def _first(products: Iterable[int], min_factor: int, max_factor: int) -> Optional[Palindrome]:
    for product in products:
        if _is_palindrome(product):
            pairs = _factor_pairs(product, min_factor, max_factor)
            if pairs:
                return Palindrome(product, pairs)
    return None


def palindrome_products(
    min_factor: int, max_factor: int
) -> Optional[tuple[Palindrome, Palindrome]]:
    """Return the smallest and largest palindromes that are products of two
    factors in ``min_factor..max_factor``, or None if there is none."""
    low, high = min_factor * min_factor, max_factor * max_factor
    smallest = _first(range(low, high + 1), min_factor, max_factor)
    if smallest is None:
        return None
    largest = _first(range(high, low - 1, -1), min_factor, max_factor)
    if largest is None:
        return None
    return smallest, largest