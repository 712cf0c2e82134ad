"""
Ordered key-value map backed by an unbalanced binary search tree.

This package provides:
- set(key, value) - Insert or update, returning the previous value
- get(key) - Lookup, raising KeyNotFoundError on a miss
- contains_key(key), size(), remove(key)
- keys(), values(), for_each(action) - Ascending key order
- dump(pen) - Debug rendering of the tree shape
"""

from bstmap.models.comparators import (
    default_comparator,
    natural_comparator,
    reverse_comparator,
)
from bstmap.models.exceptions import InvalidKeyError, KeyNotFoundError
from bstmap.models.sortedcontainers import BinarySearchTree

__all__ = [
    "BinarySearchTree",
    "InvalidKeyError",
    "KeyNotFoundError",
    "default_comparator",
    "natural_comparator",
    "reverse_comparator",
]
