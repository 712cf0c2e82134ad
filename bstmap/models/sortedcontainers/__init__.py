"""
Sorted container implementations of SimpleMap.
"""

from bstmap.models.sortedcontainers.binary_search_tree import BinarySearchTree

__all__ = ["BinarySearchTree"]
