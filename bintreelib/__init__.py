"""BinTreeLib - Generic Binary Tree Library.

BinTreeLib provides an in-memory binary tree whose nodes can be walked in
any of the classic orders and transformed without touching the source tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import BinaryTree

    root = BinaryTree(1, left=BinaryTree(2), right=BinaryTree(3))
    [node.value for node in root]                    # in-order: [2, 1, 3]
    [node.value for node in root.bf_iterator()]      # breadth-first: [1, 2, 3]
    root.reduce(lambda total, node: total + node.value, 0)   # 6
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryTree
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    create_traverser_from_config,
    traverser_class,
)

# Configuration and errors
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    FilterConfig,
    parse_strategy,
)
from .exceptions import BinTreeLibError, UnknownStrategyError, InvalidConfigError

# High-level API
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinaryTree',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'create_traverser_from_config',
    'traverser_class',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
    'FilterConfig',
    'parse_strategy',
    # Errors
    'BinTreeLibError',
    'UnknownStrategyError',
    'InvalidConfigError',
    # API
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
