"""High-level API for FoldTree.

This module provides simple, functional interfaces for common tasks on
whole trees: rendering in one call, counting, listing paths and leaves,
and forcing every branch open or shut.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .core.node import NodeKind, Tree, TreeBranch, TreeLeaf, TreeNode
from .core.traverser import get_visible_items
from .renderer import DefaultRenderer, Renderer


def _walk(node: TreeNode, path: Tuple[str, ...] = ()) -> Iterator[Tuple[TreeNode, Tuple[str, ...]]]:
    """Yield every node with its path, pre-order, ignoring collapse state."""
    yield node, path
    if node.kind is NodeKind.BRANCH:
        for child in node.children:
            yield from _walk(child, path + (child.value,))


def render_tree(tree: Tree, renderer: Optional[Renderer] = None) -> List[str]:
    """Flatten ``tree`` and render its visible items.

    Args:
        tree: Tree to render
        renderer: Renderer to use (defaults to ``DefaultRenderer()``)

    Returns:
        One line per visible node

    Example:
        >>> from foldtree import Tree, TreeBranch, TreeLeaf
        >>> tree = Tree(TreeBranch("Root", "root", [TreeLeaf("File", "file-1")]))
        >>> for line in render_tree(tree):
        ...     print(line)
        Root
        |  File
    """
    if renderer is None:
        renderer = DefaultRenderer()
    return renderer.render(get_visible_items(tree))


def count_nodes(tree: Tree, visible_only: bool = False) -> int:
    """Count nodes in a tree.

    Args:
        tree: Tree to count
        visible_only: Count only nodes not hidden by a collapsed ancestor

    Returns:
        Number of nodes
    """
    if visible_only:
        return len(get_visible_items(tree))
    return sum(1 for _ in _walk(tree.root))


def get_tree_paths(tree: Tree) -> List[Tuple[str, ...]]:
    """Return the path of every node, pre-order, root first as ``()``."""
    return [path for _, path in _walk(tree.root)]


def get_leaf_nodes(tree: Tree) -> List[TreeLeaf]:
    """Return every leaf, collapsed or not, in pre-order."""
    return [node for node, _ in _walk(tree.root) if node.kind is NodeKind.LEAF]


def _set_all(node: TreeNode, collapsed: bool) -> TreeNode:
    if node.kind is NodeKind.LEAF:
        return node
    return TreeBranch(
        node.label,
        node.value,
        tuple(_set_all(child, collapsed) for child in node.children),
        collapsed,
    )


def expand_all(tree: Tree) -> Tree:
    """Return a copy of ``tree`` with every branch expanded."""
    return Tree(root=_set_all(tree.root, False))


def collapse_all(tree: Tree) -> Tree:
    """Return a copy of ``tree`` with every branch collapsed."""
    return Tree(root=_set_all(tree.root, True))


def get_tree_stats(tree: Tree) -> Dict[str, int]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, branches, leaves, collapsed_branches,
        visible_nodes and max_depth (root at depth 0)
    """
    stats = {
        'total_nodes': 0,
        'branches': 0,
        'leaves': 0,
        'collapsed_branches': 0,
        'visible_nodes': count_nodes(tree, visible_only=True),
        'max_depth': 0,
    }

    for node, path in _walk(tree.root):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], len(path))
        if node.kind is NodeKind.BRANCH:
            stats['branches'] += 1
            if node.is_collapsed:
                stats['collapsed_branches'] += 1
        else:
            stats['leaves'] += 1

    return stats
