"""
Data models for ordered maps.
"""

from bstmap.models.comparators import Comparator
from bstmap.models.exceptions import InvalidKeyError, KeyNotFoundError

__all__ = [
    "Comparator",
    "InvalidKeyError",
    "KeyNotFoundError",
]
