"""Tests for the high-level functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    BinaryTree,
    InvalidConfigError,
    TraversalStrategy,
    UnknownStrategyError,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    traverse_tree,
)
from bintreelib.testing import create_chain, create_sample_tree, values


@pytest.fixture
def root():
    return create_sample_tree()


def test_traverse_tree_defaults_to_in_order(root):
    assert values(traverse_tree(root)) == [4, 2, 5, 1, 3]


@pytest.mark.parametrize("strategy, expected", [
    ("in_order", [4, 2, 5, 1, 3]),
    ("pre_order", [1, 2, 4, 5, 3]),
    ("post_order", [4, 5, 2, 3, 1]),
    ("bfs", [1, 2, 3, 4, 5]),
    (TraversalStrategy.BREADTH_FIRST, [1, 2, 3, 4, 5]),
])
def test_traverse_tree_strategies(root, strategy, expected):
    assert values(traverse_tree(root, strategy)) == expected


def test_traverse_tree_depth_limits(root):
    assert values(traverse_tree(root, "bfs", max_depth=1)) == [1, 2, 3]
    assert values(traverse_tree(root, "pre_order", min_depth=1)) == [2, 4, 5, 3]


def test_traverse_tree_filters(root):
    odd = values(traverse_tree(root, include_filter=lambda n: n.value % 2))
    assert odd == [5, 1, 3]

    # Exclusion wins over inclusion
    result = values(traverse_tree(
        root,
        include_filter=lambda n: n.value % 2,
        exclude_filter=lambda n: n.value == 5,
    ))
    assert result == [1, 3]


def test_filters_do_not_prune_descendants(root):
    result = values(traverse_tree(root, "pre_order", exclude_filter=lambda n: n.value == 2))
    assert result == [1, 4, 5, 3]


def test_traverse_tree_rejects_bad_arguments(root):
    with pytest.raises(UnknownStrategyError):
        traverse_tree(root, "sideways")
    with pytest.raises(InvalidConfigError):
        traverse_tree(root, max_depth=-1)


def test_count_nodes(root):
    assert count_nodes(root) == 5
    assert count_nodes(root, max_depth=1) == 3
    assert count_nodes(BinaryTree(0)) == 1


def test_find_nodes_returns_all_matches(root):
    evens = values(find_nodes(root, lambda n: n.value % 2 == 0))
    assert evens == [4, 2]
    assert values(find_nodes(root, lambda n: n.value % 2 == 0, strategy="bfs")) == [2, 4]
    assert list(find_nodes(root, lambda n: False)) == []


def test_get_leaf_nodes(root):
    assert values(get_leaf_nodes(root)) == [4, 5, 3]
    assert values(get_leaf_nodes(root, strategy="bfs")) == [3, 4, 5]


def test_get_tree_stats(root):
    stats = get_tree_stats(root)
    assert stats['total_nodes'] == 5
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 2
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['average_branching'] == pytest.approx(0.4)


def test_get_tree_stats_chain():
    stats = get_tree_stats(create_chain(4, side='right'))
    assert stats['total_nodes'] == 4
    assert stats['leaf_nodes'] == 1
    assert stats['max_depth'] == 3
    assert stats['depths'] == {0: 1, 1: 1, 2: 1, 3: 1}


def test_get_leaf_nodes_validates_at_call_time(root):
    with pytest.raises(UnknownStrategyError):
        get_leaf_nodes(root, strategy="bogus")
    with pytest.raises(InvalidConfigError):
        get_leaf_nodes(root, min_depth=-1)


def test_find_nodes_combines_include_filter(root):
    result = find_nodes(
        root,
        lambda n: n.value % 2 == 1,
        include_filter=lambda n: n.value > 1,
    )
    assert values(result) == [5, 3]
