"""Plain structural encoding of FoldTree values.

Trees, nodes and items carry data only, so they map losslessly onto dicts
and lists, and from there onto JSON. Encoding omits a branch's
``collapsed`` key when the flag is unset, so ``decode(encode(x)) == x``.

Decoding is a trust boundary: input is checked with the strict validators
first and rejected with ``TreeFormatError`` if it doesn't fit.
"""

import json
import logging
from typing import Any, Dict, Mapping

from .core.item import TreeBranchItem, TreeItem, TreeLeafItem
from .core.node import Tree, TreeBranch, TreeLeaf, TreeNode
from .core.validators import is_tree_item, is_tree_node_strict, is_tree_strict
from .errors import TreeFormatError

logger = logging.getLogger(__name__)


def _shallow_dict(node: TreeNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {"label": node.label, "value": node.value}
    if isinstance(node, TreeBranch):
        data["children"] = []
        if node.collapsed is not None:
            data["collapsed"] = node.collapsed
    return data


def node_to_dict(node: TreeNode) -> Dict[str, Any]:
    """Encode a node and its whole subtree."""
    result = _shallow_dict(node)
    stack = [(node, result)]
    while stack:
        current, data = stack.pop()
        if isinstance(current, TreeBranch):
            for child in current.children:
                child_data = _shallow_dict(child)
                data["children"].append(child_data)
                stack.append((child, child_data))
    return result


def tree_to_dict(tree: Tree) -> Dict[str, Any]:
    return {"root": node_to_dict(tree.root)}


def item_to_dict(item: TreeItem) -> Dict[str, Any]:
    """Encode a visible item; branch items always carry ``collapsed``."""
    data: Dict[str, Any] = {
        "label": item.label,
        "value": item.value,
        "path": list(item.path),
        "type": item.type.value,
    }
    if isinstance(item, TreeBranchItem):
        data["collapsed"] = item.collapsed
    return data


def _build_node(data: Any) -> TreeNode:
    # Every entry in ``order`` comes after its parent, so walking it
    # backwards builds children before the branches that hold them.
    order = []
    stack = [data]
    while stack:
        current = stack.pop()
        order.append(current)
        # Already-built nodes may sit inside otherwise plain data
        if not isinstance(current, (TreeLeaf, TreeBranch)) and "children" in current:
            stack.extend(current["children"])

    built: Dict[int, TreeNode] = {}
    for current in reversed(order):
        if isinstance(current, (TreeLeaf, TreeBranch)):
            node = current
        elif "children" not in current:
            node = TreeLeaf(current["label"], current["value"])
        else:
            node = TreeBranch(
                current["label"],
                current["value"],
                tuple(built[id(child)] for child in current["children"]),
                current.get("collapsed"),
            )
        built[id(current)] = node
    return built[id(data)]


def node_from_dict(data: Any) -> TreeNode:
    """Decode a node and its subtree.

    Raises:
        TreeFormatError: If ``data`` is not a valid node at every level
    """
    if not isinstance(data, Mapping) or not is_tree_node_strict(data):
        logger.debug("Rejected node data of type %s", type(data).__name__)
        raise TreeFormatError("Data does not describe a valid tree node")
    return _build_node(data)


def tree_from_dict(data: Any) -> Tree:
    """Decode a tree.

    Raises:
        TreeFormatError: If ``data`` is not a valid tree at every level
    """
    if not isinstance(data, Mapping) or not is_tree_strict(data):
        logger.debug("Rejected tree data of type %s", type(data).__name__)
        raise TreeFormatError("Data does not describe a valid tree")
    return Tree(root=_build_node(data["root"]))


def item_from_dict(data: Any) -> TreeItem:
    """Decode a visible item.

    Raises:
        TreeFormatError: If ``data`` is not a valid item
    """
    if not isinstance(data, Mapping) or not is_tree_item(data):
        logger.debug("Rejected item data of type %s", type(data).__name__)
        raise TreeFormatError("Data does not describe a valid tree item")
    if data["type"] == "leaf":
        return TreeLeafItem(data["label"], data["value"], tuple(data["path"]))
    return TreeBranchItem(data["label"], data["value"], tuple(data["path"]), data["collapsed"])


def dumps(tree: Tree, **json_kwargs) -> str:
    """Serialize a tree to JSON text.

    Args:
        tree: Tree to serialize
        **json_kwargs: Passed through to ``json.dumps`` (e.g. ``indent``)
    """
    return json.dumps(tree_to_dict(tree), **json_kwargs)


def loads(text: str) -> Tree:
    """Parse a tree from JSON text.

    The JSON parser itself recurses once per nesting level, so text nested
    deeper than the interpreter's recursion limit is rejected as well.

    Raises:
        TreeFormatError: If the text is not JSON, is nested too deeply to
            parse, or is not a valid tree
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise TreeFormatError("JSON is nested too deeply to parse") from e
    return tree_from_dict(data)
