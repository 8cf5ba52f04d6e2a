"""Testing utilities for FoldTree consumers."""

from .fixtures import make_deep_tree, make_file_tree, make_sample_tree

__all__ = ['make_sample_tree', 'make_file_tree', 'make_deep_tree']
