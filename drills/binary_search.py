"""Binary search over sorted sequences."""

from collections.abc import Sequence
from typing import Any, Optional


def find(array: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of ``key`` in the sorted ``array``, or None if absent."""
    lo, hi = 0, len(array)
    while hi > lo:
        if hi - lo == 1 and array[lo] != key:
            return None
        mid = lo + (hi - lo) // 2
        value = array[mid]
        if key == value:
            return mid
        if key < value:
            hi = mid
        else:
            lo = mid
    return None