"""
Property-based tests checking BinarySearchTree against a plain dict.
"""

import pytest
from hypothesis import given, strategies as st

from bstmap.models.comparators import natural_comparator
from bstmap.models.exceptions import KeyNotFoundError
from bstmap.models.sortedcontainers import BinarySearchTree

entries = st.lists(st.tuples(st.integers(-50, 50), st.text(max_size=5)))


def build(pairs):
    tree = BinarySearchTree(natural_comparator)
    for key, value in pairs:
        tree.set(key, value)
    return tree


@given(entries)
def test_size_counts_distinct_keys(pairs):
    tree = build(pairs)
    assert tree.size() == len({k for k, _ in pairs})


@given(entries)
def test_get_returns_last_value(pairs):
    tree = build(pairs)
    for key, value in dict(pairs).items():
        assert tree.get(key) == value


@given(entries, st.integers(-60, 60))
def test_contains_key_matches_get(pairs, probe):
    tree = build(pairs)
    try:
        tree.get(probe)
        found = True
    except KeyNotFoundError:
        found = False
    assert tree.contains_key(probe) == found == (probe in dict(pairs))


@given(entries)
def test_keys_strictly_ascending(pairs):
    tree = build(pairs)
    keys = list(tree.keys())
    assert keys == sorted(dict(pairs))
    assert len(keys) == tree.size()
    assert list(zip(keys, tree.values())) == sorted(dict(pairs).items())


@given(entries)
def test_set_returns_previous_value(pairs):
    tree = BinarySearchTree(natural_comparator)
    model = {}
    for key, value in pairs:
        assert tree.set(key, value) == model.get(key)
        model[key] = value


@given(entries, st.lists(st.integers(-50, 50)))
def test_remove_matches_dict(pairs, removals):
    tree = build(pairs)
    model = dict(pairs)
    for key in removals:
        assert tree.remove(key) == model.pop(key, None)

    assert tree.size() == len(model)
    assert list(tree) == sorted(model.items())
    for key in removals:
        if key not in model:
            with pytest.raises(KeyNotFoundError):
                tree.get(key)
