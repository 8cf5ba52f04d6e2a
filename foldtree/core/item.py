"""Flattened tree items for display.

A visible item is the projection of one tree node produced by
``get_visible_items``. Items carry an explicit ``type`` discriminant and,
for branches, a collapse state that is always materialized.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class ItemType(str, Enum):
    """Discriminant of a visible item.

    Being a ``str`` enum, members compare equal to ``"leaf"`` and ``"branch"``.
    """
    LEAF = "leaf"
    BRANCH = "branch"


@dataclass(frozen=True)
class TreeLeafItem:
    """Visible projection of a leaf.

    ``path`` lists the values from below the root down to and including
    this node; the root's path is empty.
    """

    label: str
    value: str
    path: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    @property
    def type(self) -> ItemType:
        return ItemType.LEAF

    @property
    def is_root(self) -> bool:
        return len(self.path) == 0


@dataclass(frozen=True)
class TreeBranchItem:
    """Visible projection of a branch, with its collapse state."""

    label: str
    value: str
    path: Tuple[str, ...] = ()
    collapsed: bool = False

    def __post_init__(self):
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    @property
    def type(self) -> ItemType:
        return ItemType.BRANCH

    @property
    def is_root(self) -> bool:
        return len(self.path) == 0


TreeItem = Union[TreeLeafItem, TreeBranchItem]
