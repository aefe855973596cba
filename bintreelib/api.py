"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the traverser and config objects for ease
of use in simple cases.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy, parse_strategy
from .core.node import BinaryTree
from .core.traverser import BreadthFirstTraverser, create_traverser_from_config

logger = logging.getLogger(__name__)


def traverse_tree(
    root: BinaryTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[BinaryTree], bool]] = None,
    exclude_filter: Optional[Callable[[BinaryTree], bool]] = None,
) -> Iterator[BinaryTree]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (in_order, pre_order, post_order, bfs)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded

    Yields:
        Nodes that match the criteria, in traversal order

    Raises:
        UnknownStrategyError: If the strategy name is not recognized
        InvalidConfigError: If the depth window is inconsistent

    Example:
        >>> for node in traverse_tree(root, "bfs", max_depth=1):
        ...     print(node.value)
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
    )
    # Build eagerly so config errors surface at call time, not on first next()
    traverser = create_traverser_from_config(config)
    return (node for node in traverser.nodes(root) if config.filter.should_include(node))


def count_nodes(root: BinaryTree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: BinaryTree,
               predicate: Callable[[BinaryTree], bool],
               **kwargs) -> Iterator[BinaryTree]:
    """Find every node that matches a predicate.

    Unlike ``BinaryTree.find`` this does not stop at the first match.
    An ``include_filter`` passed in kwargs is combined with the predicate.

    Example:
        >>> evens = list(find_nodes(root, lambda n: n.value % 2 == 0))
    """
    extra = kwargs.get('include_filter')
    if extra is None:
        kwargs['include_filter'] = predicate
    else:
        # Both must hold
        kwargs['include_filter'] = lambda node: bool(extra(node)) and bool(predicate(node))
    return traverse_tree(root, **kwargs)


def get_leaf_nodes(root: BinaryTree, **kwargs) -> Iterator[BinaryTree]:
    """Get all leaf nodes in a tree."""
    nodes = traverse_tree(root, **kwargs)
    return (node for node in nodes if node.is_leaf())


def get_tree_stats(root: BinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root of the tree to measure

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        depths (node count per depth) and average_branching

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in BreadthFirstTraverser().traverse(root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = stats['internal_nodes'] / stats['total_nodes']

    logger.debug("Computed stats for tree rooted at %r: %s nodes",
                 root, stats['total_nodes'])
    return stats
