"""
Three-way comparators for ordering map keys.

A comparator takes two keys and returns a negative number, zero, or a
positive number when the first key sorts before, equal to, or after the
second one.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def default_comparator(k1: Any, k2: Any) -> int:
    """
    Compare keys by their string form. Not very clever.

    Works for any key type, but keys with the same str() (e.g. 1 and "1")
    compare equal and numbers sort lexicographically ("10" < "9").
    """
    s1, s2 = str(k1), str(k2)
    return (s1 > s2) - (s1 < s2)


def natural_comparator(k1: Any, k2: Any) -> int:
    """Compare keys with their own < and > operators."""
    return (k1 > k2) - (k1 < k2)


def reverse_comparator(comparator: Comparator) -> Comparator:
    """Return a comparator that orders keys opposite to comparator."""

    def reversed_compare(k1: Any, k2: Any) -> int:
        return comparator(k2, k1)

    return reversed_compare
