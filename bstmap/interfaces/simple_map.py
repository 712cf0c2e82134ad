"""
SimpleMap abstract base class for ordered key-value maps.
"""

from abc import abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from bstmap.interfaces.range_iterable import RangeIterable


class SimpleMap(RangeIterable):
    """
    Abstract base class for key-value maps.

    Keys are unique; setting an existing key replaces its value.
    Inherits ordered iteration capabilities from RangeIterable.

    Implementations:
    - BinarySearchTree: Unbalanced BST ordered by a comparator
    """

    @abstractmethod
    def set(self, key: Any, value: Any) -> Any | None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Returns:
            The previous value if the key was present, None otherwise.
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value stored under key.

        Raises:
            InvalidKeyError: If key is None.
            KeyNotFoundError: If key is not in the map.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def contains_key(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if get(key) would succeed, False otherwise.
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> Any | None:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            The removed value, or None if the key was not present.
        """
        pass

    @abstractmethod
    def keys(self) -> Iterator[Any]:
        """Return an iterator over the keys in sorted order."""
        pass

    @abstractmethod
    def values(self) -> Iterator[Any]:
        """Return an iterator over the values, ordered by their keys."""
        pass

    @abstractmethod
    def for_each(self, action: Callable[[Any, Any], None]) -> None:
        """
        Call action(key, value) for every entry in sorted key order.

        Args:
            action: A two-argument visitor.
        """
        pass
