#!/usr/bin/env python3
"""
Basic BinTreeLib usage.

This example demonstrates:
- Building a tree by assigning children
- The four traversal orders
- Deriving new trees with map, filter and get_path_of_node
- Folding with reduce and the functional helpers
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import BinaryTree, get_tree_stats, traverse_tree


def build_tree() -> BinaryTree[int]:
    root = BinaryTree(1)
    root.left = BinaryTree(2)
    root.right = BinaryTree(3)
    root.left.left = BinaryTree(4)
    root.left.right = BinaryTree(5)
    return root


def main():
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)
    root = build_tree()

    print("In-order:     ", [node.value for node in root])
    print("Pre-order:    ", [node.value for node in root.pre_order_iterator()])
    print("Post-order:   ", [node.value for node in root.post_order_iterator()])
    print("Breadth-first:", [node.value for node in root.bf_iterator()])

    squared = root.map(lambda value: value * value)
    print("Squared:      ", [node.value for node in squared])

    kept = root.filter(lambda node: node.value != 4)
    print("Filtered:     ", [node.value for node in kept] if kept is not None else None)

    path = root.get_path_of_node(lambda node: node.value == 5)
    print("Path to 5:    ", [node.value for node in path.pre_order_iterator()])

    print("Sum:          ", root.reduce(lambda total, node: total + node.value, 0))
    print("Top two levels:", [node.value for node in traverse_tree(root, "bfs", max_depth=1)])
    print("Stats:        ", get_tree_stats(root))


if __name__ == "__main__":
    main()
