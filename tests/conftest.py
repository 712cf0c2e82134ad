"""
Shared pytest fixtures for ordered map tests.
"""

import io

import pytest

from bstmap.models.comparators import natural_comparator
from bstmap.models.sortedcontainers import BinarySearchTree


@pytest.fixture
def tree():
    """Provide an empty tree ordered numerically."""
    return BinarySearchTree(natural_comparator)


@pytest.fixture
def sample_entries():
    """Provide entries whose insertion order gives a non-trivial shape."""
    return [(5, "e"), (3, "c"), (8, "h"), (1, "a")]


@pytest.fixture
def sample_tree(tree, sample_entries):
    """Provide a tree loaded with sample_entries."""
    for key, value in sample_entries:
        tree.set(key, value)
    return tree


@pytest.fixture
def pen():
    """Provide a text sink for dump output."""
    return io.StringIO()
