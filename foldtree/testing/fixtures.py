"""Sample trees for FoldTree consumers' tests.

The factories return fresh, fully expanded trees unless stated otherwise,
so tests can compare results against a known layout.
"""

from ..core.node import Tree, TreeBranch, TreeLeaf


def make_sample_tree() -> Tree:
    """Return the reference tree.

    Structure::

        root
        └── branch1
            ├── leaf1
            ├── leaf2
            └── branch2
                ├── leaf3
                └── leaf4
    """
    return Tree(
        root=TreeBranch("root", "root", [
            TreeBranch("branch1", "branch1", [
                TreeLeaf("leaf1", "leaf1"),
                TreeLeaf("leaf2", "leaf2"),
                TreeBranch("branch2", "branch2", [
                    TreeLeaf("leaf3", "leaf3"),
                    TreeLeaf("leaf4", "leaf4"),
                ]),
            ]),
        ])
    )


def make_file_tree() -> Tree:
    """Return a small project layout with one collapsed folder.

    Structure::

        project
        ├── src
        │   ├── main.py
        │   └── utils      (collapsed)
        │       └── helpers.py
        └── README.md
    """
    return Tree(
        root=TreeBranch("project", "project", [
            TreeBranch("src", "src", [
                TreeLeaf("main.py", "main"),
                TreeBranch("utils", "utils", [
                    TreeLeaf("helpers.py", "helpers"),
                ], collapsed=True),
            ], collapsed=False),
            TreeLeaf("README.md", "readme"),
        ])
    )


def make_deep_tree(depth: int, fanout: int = 1) -> Tree:
    """Return a chain of branches from ``level0`` (root) down to ``level{depth}``.

    The deepest branch holds ``fanout`` leaves named ``"leaf0"``, ``"leaf1"``...
    """
    node = TreeBranch(
        f"level{depth}", f"level{depth}",
        [TreeLeaf(f"leaf{i}", f"leaf{i}") for i in range(fanout)],
    )
    for level in range(depth - 1, -1, -1):
        node = TreeBranch(f"level{level}", f"level{level}", [node])
    return Tree(root=node)
