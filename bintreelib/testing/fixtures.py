"""Tree builders for tests of BinTreeLib and its consumers.

These helpers build small, well-known tree shapes so test suites do not
repeat the same left/right wiring.
"""

from typing import Iterable, List, Optional

from ..core.node import BinaryTree


def create_sample_tree() -> BinaryTree[int]:
    """Build the standard five-node sample tree.

    Structure:
            1
           / \\
          2   3
         / \\
        4   5
    """
    root = BinaryTree(1)
    root.left = BinaryTree(2)
    root.right = BinaryTree(3)
    root.left.left = BinaryTree(4)
    root.left.right = BinaryTree(5)
    return root


def create_chain(count: int, side: str = 'left', start: int = 1) -> BinaryTree[int]:
    """Build a degenerate tree where every node has one child.

    Args:
        count: Number of nodes (at least 1)
        side: 'left' or 'right', the side each child hangs on
        start: Value of the root; values increase by one going down

    Raises:
        ValueError: If count < 1 or side is not 'left'/'right'
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if side not in ('left', 'right'):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    root = BinaryTree(start)
    current = root
    for value in range(start + 1, start + count):
        child = BinaryTree(value)
        setattr(current, side, child)
        current = child
    return root


def create_complete_tree(height: int) -> BinaryTree[int]:
    """Build a perfect tree of the given height, numbered in level order.

    A height of 0 gives a single node with value 1; node ``n`` has children
    ``2n`` and ``2n + 1``.
    """
    if height < 0:
        raise ValueError("height cannot be negative")

    last = 2 ** (height + 1) - 1

    def _build(number: int) -> Optional[BinaryTree[int]]:
        if number > last:
            return None
        return BinaryTree(number, left=_build(2 * number), right=_build(2 * number + 1))

    return _build(1)


def values(nodes: Iterable[BinaryTree]) -> List:
    """Return the values of a node sequence as a list."""
    return [node.value for node in nodes]
