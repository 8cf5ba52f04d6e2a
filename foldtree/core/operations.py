"""Path-addressed collapse state changes for FoldTree.

All operations are copy-on-write: every node on the path from the root to
the target is rebuilt, every node off the path is shared by reference with
the input tree, and the input is never modified.

A path is the sequence of child ``value``s to follow from the root; the
empty path addresses the root itself. Paths that don't resolve are not an
error - descent simply stops and the rest of the tree comes back unchanged.
"""

import logging
from typing import Callable, Optional, Sequence

from .node import NodeKind, Tree, TreeBranch, TreeNode

logger = logging.getLogger(__name__)

# Decides the new collapse flag of the target branch from the current one.
CollapseRule = Callable[[TreeBranch], bool]


def _update_node(node: TreeNode, path: Sequence[str], rule: CollapseRule) -> TreeNode:
    if node.kind is NodeKind.LEAF:
        if path:
            logger.debug("Path segment %r reaches into leaf %r, nothing to change",
                         path[0], node.value)
        return node

    if not path:
        return node.with_collapsed(rule(node))

    current, rest = path[0], path[1:]
    matched = False
    children = []
    for child in node.children:
        if child.value == current:
            matched = True
            children.append(_update_node(child, rest, rule))
        else:
            children.append(child)

    if not matched:
        logger.debug("No child of %r has value %r", node.value, current)
    return node.with_children(children)


def update_collapsed(tree: Tree, path: Sequence[str], rule: CollapseRule) -> Tree:
    """Return a new tree with the branch at ``path`` given ``rule(branch)`` as its flag.

    Args:
        tree: Tree to start from (left untouched)
        path: Child values leading from the root to the target node
        rule: Computes the new ``collapsed`` value for the target branch

    Returns:
        New Tree; leaf targets and unresolved paths leave it equal to ``tree``
    """
    return Tree(root=_update_node(tree.root, tuple(path), rule))


def expand_node(tree: Tree, path: Sequence[str]) -> Tree:
    """Expand the branch at ``path`` and return the new tree.

    Example:
        >>> from foldtree import Tree, TreeBranch, TreeLeaf
        >>> tree = Tree(TreeBranch("Root", "root", [
        ...     TreeBranch("Folder", "folder-1", [TreeLeaf("File", "file-1")], collapsed=True),
        ... ]))
        >>> expand_node(tree, ["folder-1"]).root.children[0].collapsed
        False
        >>> tree.root.children[0].collapsed
        True
    """
    return update_collapsed(tree, path, lambda branch: False)


def collapse_node(tree: Tree, path: Sequence[str]) -> Tree:
    """Collapse the branch at ``path`` and return the new tree."""
    return update_collapsed(tree, path, lambda branch: True)


def toggle_node(tree: Tree, path: Sequence[str]) -> Tree:
    """Flip the collapse state of the branch at ``path``."""
    return update_collapsed(tree, path, lambda branch: not branch.is_collapsed)


def find_node(tree: Tree, path: Sequence[str]) -> Optional[TreeNode]:
    """Resolve ``path`` to a node.

    Children are matched by value within their own parent's child list; if
    siblings share a value the first one wins.

    Returns:
        The addressed node, or None if the path does not resolve
    """
    node = tree.root
    for segment in path:
        if node.kind is NodeKind.LEAF:
            return None
        node = next((c for c in node.children if c.value == segment), None)
        if node is None:
            return None
    return node
