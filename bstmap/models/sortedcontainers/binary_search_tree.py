"""
Unbalanced binary search tree implementation of an ordered map.

Operations are O(h) where h is the tree height. There is no rebalancing, so
the shape depends only on insertion order and a sorted insertion order
degrades the tree into a list. All walks are iterative, so a degenerate tree
never runs into the interpreter recursion limit.
"""

import logging
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from bstmap.interfaces.simple_map import SimpleMap
from bstmap.models.comparators import Comparator, default_comparator
from bstmap.models.exceptions import InvalidKeyError, KeyNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """Node in the Binary Search Tree. Owned by exactly one parent."""

    key: Any
    value: Any
    left: "Node | None" = None
    right: "Node | None" = None


class BinarySearchTree(SimpleMap):
    """
    Binary Search Tree implementation of SimpleMap.

    Properties maintained:
    1. Every key in a node's left subtree compares less than the node's key
    2. Every key in a node's right subtree compares greater than the node's key
    3. Keys are unique
    4. size() equals the number of nodes reachable from the root

    Iterators are lazy and walk the tree as it is when they are created.
    Mutating the tree while iterating leaves the rest of the sequence
    undefined.
    """

    def __init__(self, comparator: Comparator | None = None) -> None:
        """
        Initialize an empty tree.

        Args:
            comparator: Three-way comparison over keys. Defaults to comparing
                        the keys' string forms (see default_comparator).
        """
        if comparator is None:
            logger.debug("No comparator given, ordering keys by str()")
            comparator = default_comparator
        elif not callable(comparator):
            raise TypeError(
                f"comparator must be callable, got {type(comparator).__name__}"
            )

        self._comparator: Comparator = comparator
        self._root: Node | None = None
        self._size: int = 0

    def set(self, key: Any, value: Any) -> Any | None:
        """Insert or update a key-value pair. O(h)"""
        self._check_key(key)
        if self._root is None:
            self._root = Node(key=key, value=value)
            self._size = 1
            return None

        current = self._root
        while True:
            comp = self._comparator(key, current.key)
            if comp == 0:
                # Key exists, update value
                old_value = current.value
                current.value = value
                return old_value
            if comp < 0:
                if current.left is None:
                    current.left = Node(key=key, value=value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(key=key, value=value)
                    break
                current = current.right

        self._size += 1
        return None

    def get(self, key: Any) -> Any:
        """Retrieve value by key. O(h)"""
        self._check_key(key)
        return self._find_node(key).value

    def size(self) -> int:
        return self._size

    def contains_key(self, key: Any) -> bool:
        try:
            self.get(key)
        except KeyNotFoundError:
            return False
        return True

    def remove(self, key: Any) -> Any | None:
        """Remove a key-value pair and return its value. O(h)"""
        self._check_key(key)

        parent = None
        node = self._root
        while node is not None:
            comp = self._comparator(key, node.key)
            if comp == 0:
                break
            parent = node
            node = node.left if comp < 0 else node.right

        if node is None:
            logger.debug(f"remove: key {key!r} not present")
            return None

        removed = node.value
        if node.left is not None and node.right is not None:
            # Node has two children - find successor
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            # Copy successor's data to node, then unlink the successor
            node.key = successor.key
            node.value = successor.value
            parent, node = successor_parent, successor

        # Node has at most one child
        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        self._size -= 1
        logger.debug(f"remove: key {key!r} unlinked, size now {self._size}")
        return removed

    def keys(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def for_each(self, action: Callable[[Any, Any], None]) -> None:
        for node in self._nodes():
            action(node.key, node.value)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return ((node.key, node.value) for node in self._nodes(start, end))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def dump(self, pen: TextIO | None = None) -> None:
        """
        Write the tree to pen (stdout by default), one line per node.

        Nodes are written pre-order as "key: value", indented two spaces per
        level. Empty child slots of a node with at least one child are
        written as "<>"; an empty tree is a single "<>".
        """
        if pen is None:
            pen = sys.stdout

        stack: list[tuple[Node | None, str]] = [(self._root, "")]
        while stack:
            node, indent = stack.pop()
            if node is None:
                print(f"{indent}<>", file=pen)
                continue

            print(f"{indent}{node.key}: {node.value}", file=pen)
            if node.left is not None or node.right is not None:
                # Right first so the left subtree is written first
                stack.append((node.right, indent + "  "))
                stack.append((node.left, indent + "  "))

    def _check_key(self, key: Any) -> None:
        if key is None:
            raise InvalidKeyError(key)

    def _find_node(self, key: Any) -> Node:
        """Find node by key, raising KeyNotFoundError on a miss."""
        current = self._root
        while current is not None:
            comp = self._comparator(key, current.key)
            if comp < 0:
                current = current.left
            elif comp > 0:
                current = current.right
            else:
                return current
        raise KeyNotFoundError(key)

    def _replace_child(
        self, parent: Node | None, node: Node, child: Node | None
    ) -> None:
        """Replace node with child in its parent's slot."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _nodes(
        self, start: Any | None = None, end: Any | None = None
    ) -> "_NodeIterator":
        return _NodeIterator(self._root, self._comparator, start, end)


class _NodeIterator(Iterator[Node]):
    """In-order iterator over tree nodes, optionally bounded to [start, end)."""

    def __init__(
        self,
        root: Node | None,
        comparator: Comparator,
        start: Any | None = None,
        end: Any | None = None,
    ) -> None:
        self._stack: list[Node] = []
        self._comparator = comparator
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and self._comparator(node.key, self._end) >= 0:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not None:
            if start is not None and self._comparator(node.key, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
