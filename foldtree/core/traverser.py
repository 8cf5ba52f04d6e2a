"""Collapse-aware flattening of trees into visible items.

Walks the tree depth-first, pre-order (a node before its children), and
stops descending at collapsed branches. The walk holds no state between
calls, so it can be restarted freely.
"""

from typing import Iterator, List, Tuple

from .item import TreeBranchItem, TreeItem, TreeLeafItem
from .node import NodeKind, Tree, TreeNode


def _to_item(node: TreeNode, path: Tuple[str, ...]) -> TreeItem:
    if node.kind is NodeKind.BRANCH:
        return TreeBranchItem(node.label, node.value, path, node.is_collapsed)
    return TreeLeafItem(node.label, node.value, path)


def iter_visible_items(tree: Tree) -> Iterator[TreeItem]:
    """Yield the visible items of ``tree`` lazily.

    Each child's path is its parent's path with the child's own value
    appended; the root's path is empty. Children of a collapsed branch are
    never visited, whatever their own state.
    """

    def _traverse_recursive(node: TreeNode, path: Tuple[str, ...]) -> Iterator[TreeItem]:
        # Parent first (pre-order)
        yield _to_item(node, path)

        if node.kind is NodeKind.BRANCH and not node.is_collapsed:
            for child in node.children:
                yield from _traverse_recursive(child, path + (child.value,))

    yield from _traverse_recursive(tree.root, ())


def get_visible_items(tree: Tree) -> List[TreeItem]:
    """Return the visible items of ``tree`` as a list.

    Example:
        >>> from foldtree import Tree, TreeBranch, TreeLeaf
        >>> tree = Tree(TreeBranch("Root", "root", [
        ...     TreeBranch("Folder 1", "folder-1", [TreeLeaf("File 1", "file-1")]),
        ...     TreeBranch("Folder 2", "folder-2", [TreeLeaf("File 2", "file-2")], collapsed=True),
        ... ]))
        >>> [item.value for item in get_visible_items(tree)]
        ['root', 'folder-1', 'file-1', 'folder-2']
    """
    return list(iter_visible_items(tree))
