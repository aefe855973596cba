"""Core components of BinTreeLib.

This module contains the BinaryTree node and the traversal strategies it
delegates to.
"""

from .node import BinaryTree
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    create_traverser_from_config,
    traverser_class,
)

__all__ = [
    "BinaryTree",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "create_traverser_from_config",
    "traverser_class",
]
