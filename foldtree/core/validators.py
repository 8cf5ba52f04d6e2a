"""Runtime shape checks for FoldTree values.

Every check is a total predicate: it returns a bool for any input and never
raises or mutates its argument. Checks accept both the dataclasses from
``foldtree.core`` and their plain structural encoding (mappings, e.g. parsed
JSON).

Two strengths exist for branches and nodes:

- non-strict (``is_tree_branch``, ``is_tree_node``) checks only the node's
  own shape and that ``children`` is a sequence, without looking inside it;
- strict (``is_tree_branch_strict``, ``is_tree_node_strict``) also validates
  every descendant.

Leaf and branch are told apart by key presence: anything with a
``children`` key is never a leaf.
"""

from collections.abc import Mapping
from typing import Any, Optional

from .item import TreeBranchItem, TreeLeafItem
from .node import Tree, TreeBranch, TreeLeaf

_MISSING = object()


def _fields(x: Any) -> Optional[Mapping]:
    """Return the key/value view of ``x``, or None if it has no fields at all.

    For the dataclasses, a branch whose ``collapsed`` is None reports no
    ``collapsed`` key, mirroring an encoding where the key is omitted.
    """
    if isinstance(x, Mapping):
        return x
    if isinstance(x, TreeLeaf):
        return {"label": x.label, "value": x.value}
    if isinstance(x, TreeBranch):
        view = {"label": x.label, "value": x.value, "children": x.children}
        if x.collapsed is not None:
            view["collapsed"] = x.collapsed
        return view
    if isinstance(x, Tree):
        return {"root": x.root}
    if isinstance(x, TreeLeafItem):
        return {"label": x.label, "value": x.value, "path": x.path, "type": "leaf"}
    if isinstance(x, TreeBranchItem):
        return {
            "label": x.label,
            "value": x.value,
            "path": x.path,
            "type": "branch",
            "collapsed": x.collapsed,
        }
    return None


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (list, tuple))


def _has_label_and_value(fields: Mapping) -> bool:
    return (
        isinstance(fields.get("label", _MISSING), str)
        and isinstance(fields.get("value", _MISSING), str)
    )


def is_tree_leaf(x: Any) -> bool:
    """Check whether ``x`` is a leaf: string label and value, no children key."""
    fields = _fields(x)
    if fields is None:
        return False
    return _has_label_and_value(fields) and "children" not in fields


def is_tree_branch(x: Any) -> bool:
    """Check whether ``x`` is a branch, without validating its children.

    ``collapsed`` may be absent; when present it must be a bool.
    """
    fields = _fields(x)
    if fields is None or not _has_label_and_value(fields):
        return False
    if not _is_sequence(fields.get("children", _MISSING)):
        return False
    if "collapsed" in fields and not isinstance(fields["collapsed"], bool):
        return False
    return True


def _subtree_is_valid(x: Any) -> bool:
    """Validate ``x`` and every descendant using an explicit stack.

    Python stack depth stays constant, so a chain of any length gets an
    answer. Data that contains itself is not a tree and is rejected.
    """
    on_path = set()
    stack = [(x, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            on_path.discard(id(node))
            continue
        if is_tree_leaf(node):
            continue
        if not is_tree_branch(node) or id(node) in on_path:
            return False
        on_path.add(id(node))
        stack.append((node, True))
        stack.extend((child, False) for child in _fields(node)["children"])
    return True


def is_tree_branch_strict(x: Any) -> bool:
    """Check whether ``x`` is a branch whose whole subtree is valid."""
    return is_tree_branch(x) and _subtree_is_valid(x)


def is_tree_node(x: Any) -> bool:
    """Non-strict check for a leaf or a branch."""
    return is_tree_leaf(x) or is_tree_branch(x)


def is_tree_node_strict(x: Any) -> bool:
    """Strict check for a leaf or a branch, covering all descendants."""
    return _subtree_is_valid(x)


def is_tree(x: Any) -> bool:
    """Check whether ``x`` is a tree; the root is validated non-strictly."""
    fields = _fields(x)
    if fields is None or "root" not in fields:
        return False
    return is_tree_node(fields["root"])


def is_tree_strict(x: Any) -> bool:
    """Check whether ``x`` is a tree whose every node is valid."""
    fields = _fields(x)
    if fields is None or "root" not in fields:
        return False
    return is_tree_node_strict(fields["root"])


def is_tree_item(x: Any) -> bool:
    """Check whether ``x`` is a visible item.

    Requires string label and value, a path of strings and a ``type`` of
    ``"leaf"`` or ``"branch"``. Branch items also need a bool ``collapsed``.
    """
    fields = _fields(x)
    if fields is None or not _has_label_and_value(fields):
        return False
    if "type" not in fields:
        return False

    path = fields.get("path", _MISSING)
    if not _is_sequence(path) or not all(isinstance(p, str) for p in path):
        return False

    item_type = fields["type"]
    if item_type == "leaf":
        return True
    if item_type == "branch":
        return isinstance(fields.get("collapsed", _MISSING), bool)
    return False


def is_tree_leaf_item(x: Any) -> bool:
    """Check whether ``x`` is a visible leaf item."""
    return is_tree_item(x) and _fields(x)["type"] == "leaf"


def is_tree_branch_item(x: Any) -> bool:
    """Check whether ``x`` is a visible branch item."""
    return is_tree_item(x) and _fields(x)["type"] == "branch"
