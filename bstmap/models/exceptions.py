"""
Custom exceptions for ordered maps.
"""

from typing import Any


class InvalidKeyError(ValueError):
    """
    Raised when a key that can never be stored (None) is passed to a map.

    This is a usage error, not a lookup miss.
    """

    def __init__(self, key: Any = None):
        self.key = key
        super().__init__(f"invalid key: {key!r}")


class KeyNotFoundError(KeyError):
    """
    Raised when a lookup runs off the bottom of the tree without a match.
    """

    def __init__(self, key: Any):
        """
        Initialize lookup error.

        Args:
            key: The key that was searched for.
        """
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
