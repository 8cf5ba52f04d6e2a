"""FoldTree - Immutable Collapsible Tree Library.

FoldTree models a labeled tree whose branches can be collapsed and
expanded, flattens it into the list of currently visible items, and
renders those items as display lines.

Typical flow:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    tree = collapse_node(tree, ["src", "utils"])    # returns a new Tree
    items = get_visible_items(tree)                 # depth-first, collapse-aware
    lines = DefaultRenderer().render(items)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every operation is pure: inputs are never modified, and unchanged
subtrees are shared between the old and the new tree.
"""

__version__ = "0.1.0"

from .core import (
    NodeKind,
    Tree,
    TreeBranch,
    TreeLeaf,
    TreeNode,
    ItemType,
    TreeBranchItem,
    TreeItem,
    TreeLeafItem,
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
    collapse_node,
    expand_node,
    find_node,
    toggle_node,
    get_visible_items,
    iter_visible_items,
)
from .config import RendererOptions
from .renderer import Renderer, DefaultRenderer
from .errors import FoldTreeError, TreeFormatError, RendererConfigError
from .api import (
    render_tree,
    count_nodes,
    get_tree_paths,
    get_leaf_nodes,
    expand_all,
    collapse_all,
    get_tree_stats,
)
from . import codec

__all__ = [
    "__version__",
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
    "get_visible_items",
    "iter_visible_items",
    # Rendering
    "RendererOptions",
    "Renderer",
    "DefaultRenderer",
    # Errors
    "FoldTreeError",
    "TreeFormatError",
    "RendererConfigError",
    # API
    "render_tree",
    "count_nodes",
    "get_tree_paths",
    "get_leaf_nodes",
    "expand_all",
    "collapse_all",
    "get_tree_stats",
    "codec",
]
