"""Core data model and pure operations of FoldTree.

This package holds the node and item types, their validators, and the
copy-on-write operations. Nothing here performs I/O.
"""

from .node import NodeKind, Tree, TreeBranch, TreeLeaf, TreeNode
from .item import ItemType, TreeBranchItem, TreeItem, TreeLeafItem
from .validators import (
    is_tree,
    is_tree_strict,
    is_tree_branch,
    is_tree_branch_strict,
    is_tree_branch_item,
    is_tree_item,
    is_tree_leaf,
    is_tree_leaf_item,
    is_tree_node,
    is_tree_node_strict,
)
from .operations import (
    collapse_node,
    expand_node,
    find_node,
    toggle_node,
    update_collapsed,
)
from .traverser import get_visible_items, iter_visible_items

__all__ = [
    # Model
    "NodeKind",
    "Tree",
    "TreeBranch",
    "TreeLeaf",
    "TreeNode",
    "ItemType",
    "TreeBranchItem",
    "TreeItem",
    "TreeLeafItem",
    # Validators
    "is_tree",
    "is_tree_strict",
    "is_tree_branch",
    "is_tree_branch_strict",
    "is_tree_branch_item",
    "is_tree_item",
    "is_tree_leaf",
    "is_tree_leaf_item",
    "is_tree_node",
    "is_tree_node_strict",
    # Operations
    "collapse_node",
    "expand_node",
    "find_node",
    "toggle_node",
    "update_collapsed",
    "get_visible_items",
    "iter_visible_items",
]
