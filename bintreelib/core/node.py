"""BinaryTree node for BinTreeLib.

A BinaryTree is both a node and the tree rooted at it. The value is fixed
at construction; the left/right links are plain attributes the caller
assigns to shape the tree. Every traversal is a lazy generator, and every
derived structure (map, filter, get_path_of_node) is built from fresh nodes
so mutating a result never touches the source tree.
"""

from typing import (
    Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union,
)

from ..config import DepthConfig, TraversalStrategy
from .traverser import (
    BreadthFirstTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

# Marks "no initial value" for reduce, so None stays a usable initial value
_MISSING: Any = object()


class BinaryTree(Generic[T]):
    """A binary tree node holding a value and two optional children.

    Example:
        >>> root = BinaryTree(1)
        >>> root.left = BinaryTree(2)
        >>> root.right = BinaryTree(3)
        >>> [node.value for node in root]
        [2, 1, 3]
    """

    def __init__(self,
                 value: T,
                 left: Optional['BinaryTree[T]'] = None,
                 right: Optional['BinaryTree[T]'] = None):
        """Create a new node.

        Args:
            value: Value stored in the node (any type, never validated)
            left: Optional left subtree
            right: Optional right subtree
        """
        self._value = value
        self.left = left
        self.right = right

    @property
    def value(self) -> T:
        """The node's value. Read-only once the node exists."""
        return self._value

    def __repr__(self) -> str:
        children = [side for side in ('left', 'right') if getattr(self, side) is not None]
        suffix = f", children={children}" if children else ""
        return f"{self.__class__.__name__}({self._value!r}{suffix})"

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> List['BinaryTree[T]']:
        """Return the present children, left first."""
        return [child for child in (self.left, self.right) if child is not None]

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf (0 for a leaf)."""
        return max(depth for _, depth in BreadthFirstTraverser().traverse(self))

    def __len__(self) -> int:
        """Number of nodes in the tree rooted here."""
        return sum(1 for _ in self)

    # Traversals

    def __iter__(self) -> Iterator['BinaryTree[T]']:
        """Default iteration order: depth-first in-order."""
        return self.df_iterator()

    def df_iterator(self) -> Iterator['BinaryTree[T]']:
        """Depth-first in-order traversal: left subtree, node, right subtree."""
        return InOrderTraverser().nodes(self)

    def bf_iterator(self) -> Iterator['BinaryTree[T]']:
        """Breadth-first traversal starting at this node."""
        return BreadthFirstTraverser().nodes(self)

    def pre_order_iterator(self) -> Iterator['BinaryTree[T]']:
        """Pre-order traversal: node, left subtree, right subtree."""
        return PreOrderTraverser().nodes(self)

    def post_order_iterator(self) -> Iterator['BinaryTree[T]']:
        """Post-order traversal: left subtree, right subtree, node."""
        return PostOrderTraverser().nodes(self)

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator['BinaryTree[T]']:
        """Traverse with a named strategy and an optional depth window.

        Args:
            strategy: TraversalStrategy or name ("in_order", "pre_order",
                "post_order", "bfs", ...)
            max_depth: Deepest level to visit, relative to this node
            min_depth: Shallowest level to yield

        Returns:
            Lazy iterator of nodes

        Raises:
            UnknownStrategyError: If the strategy name is not recognized
            InvalidConfigError: If the depth window is inconsistent
        """
        traverser = create_traverser(strategy, DepthConfig(min_depth=min_depth, max_depth=max_depth))
        return traverser.nodes(self)

    # Derived operations

    def map(self, callback: Callable[[T], U]) -> 'BinaryTree[U]':
        """Build a tree of the same shape with every value transformed.

        Args:
            callback: Function applied to each node's value

        Returns:
            A new tree; no node of this tree is reused
        """
        node = BinaryTree(callback(self._value))
        if self.left is not None:
            node.left = self.left.map(callback)
        if self.right is not None:
            node.right = self.right.map(callback)
        return node

    def find(self,
             predicate: Callable[['BinaryTree[T]'], bool],
             iterator: Optional[Iterable['BinaryTree[T]']] = None) -> Optional['BinaryTree[T]']:
        """Return the first node that satisfies the predicate.

        Args:
            predicate: Function to test each node
            iterator: Traversal to search (default: in-order)

        Returns:
            The first matching node, or None if none matches
        """
        for node in (self if iterator is None else iterator):
            if predicate(node):
                return node
        return None

    def for_each(self,
                 callback: Callable[['BinaryTree[T]'], Any],
                 iterator: Optional[Iterable['BinaryTree[T]']] = None) -> None:
        """Call ``callback(node)`` for every node in traversal order."""
        for node in (self if iterator is None else iterator):
            callback(node)

    def flat(self, iterator: Optional[Iterable['BinaryTree[T]']] = None) -> List['BinaryTree[T]']:
        """Collect the traversal (default: in-order) into a list of nodes."""
        return [node for node in (self if iterator is None else iterator)]

    def filter(self, predicate: Callable[['BinaryTree[T]'], bool]) -> Optional['BinaryTree[T]']:
        """Copy the tree keeping only the nodes that satisfy the predicate.

        The check is applied top-down: a node that fails the predicate is
        dropped together with its whole subtree, even if descendants would
        have matched. Matching descendants are never re-linked higher up.

        Args:
            predicate: Function to test each node

        Returns:
            A new tree, or None if this node fails the predicate
        """
        if not predicate(self):
            return None

        node = BinaryTree(self._value)
        if self.left is not None:
            node.left = self.left.filter(predicate)
        if self.right is not None:
            node.right = self.right.filter(predicate)
        return node

    def get_path_of_node(self,
                         predicate: Callable[['BinaryTree[T]'], bool]) -> Optional['BinaryTree[T]']:
        """Extract the path from this node to the first matching node.

        The search checks the current node, then the left subtree, then the
        right subtree. The result is a new degenerate tree: each node on the
        path has a single child on the side leading to the target.

        Args:
            predicate: Function to test each node

        Returns:
            The path tree, or None if no node matches
        """
        if predicate(self):
            return BinaryTree(self._value)

        if self.left is not None:
            left_path = self.left.get_path_of_node(predicate)
            if left_path is not None:
                return BinaryTree(self._value, left=left_path)

        if self.right is not None:
            right_path = self.right.get_path_of_node(predicate)
            if right_path is not None:
                return BinaryTree(self._value, right=right_path)

        return None

    def reduce(self,
               callback: Callable[[R, 'BinaryTree[T]'], R],
               initial: R = _MISSING) -> R:
        """Fold the in-order traversal into a single result.

        Without ``initial`` the first node visited seeds the accumulator and
        folding starts from the second node, so a single-node tree reduces
        to the node itself.

        Args:
            callback: ``callback(accumulator, node)`` returning the next
                accumulator
            initial: Optional starting accumulator (None is allowed)

        Returns:
            The final accumulator
        """
        nodes = iter(self)
        accumulator = next(nodes) if initial is _MISSING else initial
        for node in nodes:
            accumulator = callback(accumulator, node)
        return accumulator
