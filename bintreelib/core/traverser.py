"""Tree traversal strategies for BinTreeLib.

Traversers implement the visiting orders for a binary tree. Each one yields
(node, depth) tuples lazily, so callers can stop pulling at any point.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional, Tuple, Type, Union

from ..config import DepthConfig, TraversalConfig, TraversalStrategy, parse_strategy
from ..exceptions import InvalidConfigError

if TYPE_CHECKING:
    from .node import BinaryTree

logger = logging.getLogger(__name__)


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers walk a tree in a particular order and report the depth of
    every node relative to the starting node. A DepthConfig restricts which
    depths are reported and how deep the walk goes.
    """

    strategy: TraversalStrategy

    def __init__(self, depth: Optional[DepthConfig] = None):
        """Initialize traverser with an optional depth window.

        Args:
            depth: Depth limits (None = whole tree)
        """
        self.depth = depth or DepthConfig()

    @abstractmethod
    def traverse(self, root: 'BinaryTree') -> Iterator[Tuple['BinaryTree', int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def nodes(self, root: 'BinaryTree') -> Iterator['BinaryTree']:
        """Traverse the tree yielding only the nodes."""
        for node, _ in self.traverse(root):
            yield node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(depth={self.depth!r})"


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal: left subtree, node, right subtree.

    This is the default order of a BinaryTree.
    """

    strategy = TraversalStrategy.IN_ORDER

    def traverse(self, root: 'BinaryTree') -> Iterator[Tuple['BinaryTree', int]]:
        # Stack of (node, depth, expanded); an expanded node is ready to yield
        stack: List[Tuple['BinaryTree', int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self.depth.should_yield(depth):
                    yield (node, depth)
                continue

            explore = self.depth.should_explore(depth)
            if explore and node.right is not None:
                stack.append((node.right, depth + 1, False))
            stack.append((node, depth, True))
            if explore and node.left is not None:
                stack.append((node.left, depth + 1, False))


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, left subtree, right subtree.

    Good for copying trees or prefix notation.
    """

    strategy = TraversalStrategy.PRE_ORDER

    def traverse(self, root: 'BinaryTree') -> Iterator[Tuple['BinaryTree', int]]:
        stack: List[Tuple['BinaryTree', int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            # Yield parent first (pre-order)
            if self.depth.should_yield(depth):
                yield (node, depth)

            # Right is pushed first so the left subtree comes off the stack first
            if self.depth.should_explore(depth):
                for child in reversed(node.children()):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, node.

    Processes nodes after their entire subtree has been processed, which
    suits aggregation and teardown.
    """

    strategy = TraversalStrategy.POST_ORDER

    def traverse(self, root: 'BinaryTree') -> Iterator[Tuple['BinaryTree', int]]:
        # Stack of (node, depth, expanded); an expanded node is ready to yield
        stack: List[Tuple['BinaryTree', int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                # Children are done, yield parent (post-order)
                if self.depth.should_yield(depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self.depth.should_explore(depth):
                for child in reversed(node.children()):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, left
    child before right child.
    """

    strategy = TraversalStrategy.BREADTH_FIRST

    def traverse(self, root: 'BinaryTree') -> Iterator[Tuple['BinaryTree', int]]:
        # Queue stores (node, depth) tuples
        queue: Deque[Tuple['BinaryTree', int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self.depth.should_yield(depth):
                yield (node, depth)

            if self.depth.should_explore(depth):
                for child in node.children():
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}


def traverser_class(strategy: Union[TraversalStrategy, str]) -> Type[TreeTraverser]:
    """Return the traverser class implementing a strategy."""
    return _TRAVERSERS[parse_strategy(strategy)]


def create_traverser(strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                     depth: Optional[DepthConfig] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (in_order, pre_order,
            post_order, bfs and their aliases)
        depth: Optional depth window

    Returns:
        TreeTraverser instance

    Raises:
        UnknownStrategyError: If strategy name is not recognized
        InvalidConfigError: If the depth window is inconsistent
    """
    config = TraversalConfig(strategy=parse_strategy(strategy), depth=depth or DepthConfig())
    return create_traverser_from_config(config)


def create_traverser_from_config(config: TraversalConfig) -> TreeTraverser:
    """Create a traverser from a validated TraversalConfig.

    Raises:
        InvalidConfigError: If ``config.validate()`` reports problems
    """
    errors = config.validate()
    if errors:
        logger.debug("Rejected traversal config %r: %s", config, errors)
        raise InvalidConfigError(errors)

    traverser = _TRAVERSERS[config.strategy](config.depth)
    logger.debug("Created %r", traverser)
    return traverser
