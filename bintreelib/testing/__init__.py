"""Testing utilities for BinTreeLib consumers."""

from .fixtures import create_sample_tree, create_chain, create_complete_tree, values

__all__ = ['create_sample_tree', 'create_chain', 'create_complete_tree', 'values']
