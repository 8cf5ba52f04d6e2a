#!/usr/bin/env python3
"""
File-browser style example for FoldTree.

This example demonstrates:
- Building a tree from a directory on disk
- Collapsing and expanding folders by path
- Rendering the visible rows with different looks
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from foldtree import (
    DefaultRenderer,
    RendererOptions,
    Tree,
    TreeBranch,
    TreeLeaf,
    collapse_node,
    expand_node,
    get_tree_stats,
    render_tree,
)


def build_node(path: Path, max_depth: int, depth: int = 0):
    """Build a node for ``path``; folders below ``max_depth`` start collapsed."""
    if not path.is_dir():
        return TreeLeaf(path.name, path.name)

    try:
        entries = sorted(path.iterdir(), key=lambda p: (not p.is_dir(), p.name.casefold()))
    except OSError:
        entries = []

    children = [build_node(p, max_depth, depth + 1) for p in entries] if depth < max_depth else []
    return TreeBranch(path.name or str(path), path.name, children, collapsed=depth >= 1)


def main():
    """Show a directory as a collapsible tree."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    tree = Tree(build_node(root_path, max_depth=3))

    print(f"Browsing: {root_path}")
    print("-" * 50)
    for line in render_tree(tree):
        print(line)

    # Open the first folder, as a click on its row would
    first = next((c for c in tree.root.children if isinstance(c, TreeBranch)), None)
    if first is not None:
        tree = expand_node(tree, [first.value])
        print(f"\nAfter expanding {first.label}:")
        print("-" * 50)
        for line in render_tree(tree, DefaultRenderer(RendererOptions.box_drawing())):
            print(line)

        tree = collapse_node(tree, [first.value])

    stats = get_tree_stats(tree)
    print("\nTree Summary:")
    print(f"  Nodes:   {stats['total_nodes']:,}")
    print(f"  Visible: {stats['visible_nodes']:,}")
    print(f"  Folders: {stats['branches']:,} ({stats['collapsed_branches']:,} collapsed)")


if __name__ == "__main__":
    main()
