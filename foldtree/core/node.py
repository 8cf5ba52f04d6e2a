"""Tree node types for FoldTree.

Nodes are plain immutable values. A leaf carries a label and a value, a
branch additionally owns an ordered tuple of children and an optional
collapse flag. The ``value`` of a node only has to be unique among its
siblings, since paths are resolved one child list at a time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Union


class NodeKind(Enum):
    """Explicit discriminant for tree nodes."""
    LEAF = "leaf"
    BRANCH = "branch"


@dataclass(frozen=True)
class TreeLeaf:
    """Terminal node of a tree.

    Attributes:
        label: Display text
        value: Identifier, unique among siblings, used for path addressing
    """

    label: str
    value: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LEAF

    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class TreeBranch:
    """Node owning an ordered list of children.

    ``collapsed`` is optional: ``None`` means the flag is absent, which
    reads the same as ``False`` (expanded). Children passed as any sequence
    are stored as a tuple so the branch stays hashable and immutable.

    Attributes:
        label: Display text
        value: Identifier, unique among siblings, used for path addressing
        children: Child nodes in display order
        collapsed: Collapse flag, or None when unset
    """

    label: str
    value: str
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)
    collapsed: Optional[bool] = None

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BRANCH

    @property
    def is_collapsed(self) -> bool:
        """Collapse state with the absent flag read as expanded."""
        return bool(self.collapsed)

    def is_leaf(self) -> bool:
        return False

    def with_children(self, children: Sequence["TreeNode"]) -> "TreeBranch":
        """Return a copy of this branch holding ``children``."""
        return TreeBranch(self.label, self.value, tuple(children), self.collapsed)

    def with_collapsed(self, collapsed: bool) -> "TreeBranch":
        """Return a copy of this branch with the collapse flag set."""
        return TreeBranch(self.label, self.value, self.children, collapsed)


TreeNode = Union[TreeLeaf, TreeBranch]


@dataclass(frozen=True)
class Tree:
    """A tree with a single root node.

    The whole structure is an immutable value. Operations that change
    collapse state return a new ``Tree`` sharing every untouched subtree
    with the input tree.
    """

    root: TreeNode
