"""Unit tests for structural encoding of trees and items."""

import json
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from foldtree import (
    Tree,
    TreeBranch,
    TreeBranchItem,
    TreeFormatError,
    TreeLeaf,
    TreeLeafItem,
    codec,
    collapse_node,
    get_visible_items,
)
from foldtree.testing import make_deep_tree, make_file_tree, make_sample_tree


class TestEncoding(unittest.TestCase):
    """Test conversion to plain data."""

    def test_absent_collapsed_is_omitted(self):
        """Test that an unset collapse flag leaves no key behind."""
        data = codec.node_to_dict(TreeBranch("Folder", "f", [TreeLeaf("File", "x")]))
        self.assertEqual(
            data,
            {"label": "Folder", "value": "f", "children": [{"label": "File", "value": "x"}]},
        )

    def test_collapsed_is_kept_when_set(self):
        """Test that an explicit False flag is encoded."""
        data = codec.node_to_dict(TreeBranch("Folder", "f", collapsed=False))
        self.assertIs(data["collapsed"], False)

    def test_items(self):
        """Test encoding of leaf and branch items."""
        self.assertEqual(
            codec.item_to_dict(TreeLeafItem("File", "x", ("x",))),
            {"label": "File", "value": "x", "path": ["x"], "type": "leaf"},
        )
        self.assertEqual(
            codec.item_to_dict(TreeBranchItem("Folder", "f", (), True)),
            {"label": "Folder", "value": "f", "path": [], "type": "branch", "collapsed": True},
        )

    def test_output_is_json_compatible(self):
        """Test that encoded flags come out as JSON booleans."""
        text = json.dumps(codec.tree_to_dict(make_file_tree()))
        self.assertIn('"collapsed": true', text)


class TestDecoding(unittest.TestCase):
    """Test conversion from plain data."""

    def test_round_trip_trees(self):
        """Test decoding what was encoded gives an equal tree."""
        for tree in (make_sample_tree(), make_file_tree(), collapse_node(make_sample_tree(), [])):
            self.assertEqual(codec.tree_from_dict(codec.tree_to_dict(tree)), tree)

    def test_round_trip_items(self):
        """Test decoding what was encoded gives equal items."""
        for item in get_visible_items(make_file_tree()):
            self.assertEqual(codec.item_from_dict(codec.item_to_dict(item)), item)

    def test_json_round_trip(self):
        """Test dumps and loads on the file tree."""
        tree = make_file_tree()
        self.assertEqual(codec.loads(codec.dumps(tree, indent=2)), tree)

    def test_decoded_children_are_tuples(self):
        """Test that decoded branches hold tuples."""
        node = codec.node_from_dict(
            {"label": "a", "value": "a", "children": [{"label": "b", "value": "b"}]}
        )
        self.assertEqual(node, TreeBranch("a", "a", (TreeLeaf("b", "b"),)))
        self.assertIsInstance(node.children, tuple)

    def test_invalid_nested_node_rejected(self):
        """Test rejection of a bad node below the root."""
        data = {"root": {"label": "a", "value": "a", "children": [{"label": "b"}]}}
        with self.assertRaises(TreeFormatError):
            codec.tree_from_dict(data)

    def test_non_mapping_rejected(self):
        """Test rejection of input that is not a mapping."""
        for bad in (None, [], "tree", 3):
            with self.assertRaises(TreeFormatError):
                codec.tree_from_dict(bad)
            with self.assertRaises(TreeFormatError):
                codec.node_from_dict(bad)
            with self.assertRaises(TreeFormatError):
                codec.item_from_dict(bad)

    def test_invalid_item_rejected(self):
        """Test rejection of a branch item without a flag."""
        with self.assertRaises(TreeFormatError):
            codec.item_from_dict({"label": "a", "value": "a", "path": [], "type": "branch"})

    def test_bad_json_rejected(self):
        """Test rejection of malformed JSON text."""
        with self.assertRaises(TreeFormatError):
            codec.loads("{not json")

    def test_format_error_is_value_error(self):
        """Test that format errors can be caught as ValueError."""
        with self.assertRaises(ValueError):
            codec.loads('{"root": 1}')

    def test_mixed_input_with_built_nodes(self):
        """Test decoding plain data that already holds built nodes."""
        leaf = TreeLeaf("b", "b")
        tree = codec.tree_from_dict({"root": {"label": "a", "value": "a", "children": [leaf]}})
        self.assertIs(tree.root.children[0], leaf)
        self.assertEqual(tree, Tree(TreeBranch("a", "a", [leaf])))


def chain_values(node):
    """Return the values down the first-child chain, walking without recursion."""
    values = [node.value]
    while isinstance(node, TreeBranch) and node.children:
        node = node.children[0]
        values.append(node.value)
    return values


class TestDeepTrees(unittest.TestCase):
    """Test encoding and decoding of long branch chains."""

    def test_deep_dict_round_trip(self):
        """A 2500 level tree survives dict encoding and decoding."""
        tree = make_deep_tree(2500)
        restored = codec.tree_from_dict(codec.tree_to_dict(tree))
        self.assertEqual(chain_values(restored.root), chain_values(tree.root))
        self.assertEqual(len(chain_values(restored.root)), 2502)

    def test_deep_json_round_trip(self):
        """A tree a few hundred levels deep survives JSON text."""
        tree = make_deep_tree(400)
        restored = codec.loads(codec.dumps(tree))
        self.assertEqual(chain_values(restored.root), chain_values(tree.root))

    def test_json_too_deep_to_parse_rejected(self):
        """JSON nested past the parser's limit gives a format error."""
        depth = 200_000
        text = (
            '{"root": '
            + '{"label": "a", "value": "a", "children": [' * depth
            + ']}' * depth
            + '}'
        )
        with self.assertRaises(TreeFormatError):
            codec.loads(text)


if __name__ == "__main__":
    unittest.main()
