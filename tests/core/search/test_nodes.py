"""
Tests for search nodes and the node arena.
"""

import pytest

from mazesearch.core.exceptions import SearchStateError
from mazesearch.core.search.nodes import NodeArena, SearchNode


def test_search_node_validation():
    """Test node depth and parent consistency checks."""
    with pytest.raises(ValueError, match="depth cannot be negative"):
        SearchNode(position=(0, 0), depth=-1)
    with pytest.raises(ValueError, match="only the start node"):
        SearchNode(position=(0, 0), depth=1)
    with pytest.raises(ValueError, match="only the start node"):
        SearchNode(position=(0, 0), depth=0, parent=3)


def test_arena_handles_are_sequential():
    """Test handles index nodes in creation order."""
    arena = NodeArena()
    root = arena.add((0, 0), depth=0)
    child = arena.add((0, 1), depth=1, parent=root)
    assert (root, child) == (0, 1)
    assert len(arena) == 2
    assert arena[child].parent == root
    assert arena.get(child).position == (0, 1)


def test_arena_shared_parent():
    """Test several nodes may share one predecessor."""
    arena = NodeArena()
    root = arena.add((1, 1), depth=0)
    left = arena.add((1, 0), depth=1, parent=root)
    up = arena.add((0, 1), depth=1, parent=root)
    assert arena[left].parent == arena[up].parent == root


def test_arena_rejects_bad_parent():
    """Test unknown parents and non-increasing depths are rejected."""
    arena = NodeArena()
    root = arena.add((0, 0), depth=0)
    with pytest.raises(SearchStateError, match="Unknown node handle 5"):
        arena.add((0, 1), depth=1, parent=5)
    with pytest.raises(SearchStateError, match="parent depth is 0"):
        arena.add((0, 1), depth=2, parent=root)


def test_ancestry_walks_to_root():
    """Test ancestry yields the node first and the start node last."""
    arena = NodeArena()
    a = arena.add((0, 0), depth=0)
    b = arena.add((0, 1), depth=1, parent=a)
    c = arena.add((0, 2), depth=2, parent=b)
    assert [node.position for node in arena.ancestry(c)] == [(0, 2), (0, 1), (0, 0)]


def test_deep_chain_is_iterative():
    """Test very long parent chains do not hit recursion limits."""
    arena = NodeArena()
    handle = arena.add((0, 0), depth=0)
    for depth in range(1, 5000):
        handle = arena.add((0, depth), depth=depth, parent=handle)
    assert sum(1 for _ in arena.ancestry(handle)) == 5000


def test_clear_discards_all_nodes():
    """Test clearing the arena drops every node at once."""
    arena = NodeArena()
    arena.add((0, 0), depth=0)
    arena.clear()
    assert len(arena) == 0
    with pytest.raises(SearchStateError):
        arena.get(0)
