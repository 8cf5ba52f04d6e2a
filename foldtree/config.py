"""Configuration system for FoldTree rendering.

This module defines how users describe the look of rendered trees:
how deep each item is indented, the indent unit, and the symbols placed
before root, leaf and branch labels.
"""

from dataclasses import dataclass, fields, replace
from typing import Callable, List, Union

from .core.item import TreeBranchItem, TreeItem, TreeLeafItem

LeafSymbol = Union[str, Callable[[TreeLeafItem], str]]
BranchSymbol = Union[str, Callable[[TreeBranchItem], str]]


def default_depth(item: TreeItem) -> int:
    """Root and its direct children sit at depth 0, grandchildren at 1, and so on."""
    return max(0, len(item.path) - 1)


def default_branch_symbol(item: TreeBranchItem) -> str:
    return "|+ " if item.collapsed else "|- "


@dataclass(frozen=True)
class RendererOptions:
    """Complete configuration for ``DefaultRenderer``.

    Symbols may be plain strings or callables computing the symbol from
    the item being rendered.

    Attributes:
        depth: Number of ``indent`` repetitions for an item
        indent: Indentation unit
        root_symbol: Symbol for the item whose path is empty, leaf or branch
        leaf_symbol: Symbol for non-root leaf items
        branch_symbol: Symbol for non-root branch items
    """

    depth: Callable[[TreeItem], int] = default_depth
    indent: str = " "
    root_symbol: str = ""
    leaf_symbol: LeafSymbol = "|  "
    branch_symbol: BranchSymbol = default_branch_symbol

    # Convenience constructors for common looks

    @classmethod
    def ascii(cls) -> "RendererOptions":
        """Plain ASCII markers (the defaults)."""
        return cls()

    @classmethod
    def box_drawing(cls) -> "RendererOptions":
        """File-tree look using box-drawing characters.

        Returns:
            RendererOptions drawing ``├── [+] dir`` style lines
        """
        return cls(
            indent="│   ",
            leaf_symbol="├── ",
            branch_symbol=lambda item: "├── [+] " if item.collapsed else "├── [-] ",
        )

    @classmethod
    def nested(cls, width: int = 2) -> "RendererOptions":
        """Indent every level below the root, root children included.

        Args:
            width: Spaces per level
        """
        return cls(depth=lambda item: len(item.path), indent=" " * width)

    @classmethod
    def option_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def merged(self, **overrides) -> "RendererOptions":
        """Return a copy with ``overrides`` applied.

        Raises:
            TypeError: If an override name is not an option
        """
        return replace(self, **overrides)

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not callable(self.depth):
            errors.append("depth must be callable")

        if not isinstance(self.indent, str):
            errors.append("indent must be a string")

        if not isinstance(self.root_symbol, str):
            errors.append("root_symbol must be a string")

        if not (isinstance(self.leaf_symbol, str) or callable(self.leaf_symbol)):
            errors.append("leaf_symbol must be a string or callable")

        if not (isinstance(self.branch_symbol, str) or callable(self.branch_symbol)):
            errors.append("branch_symbol must be a string or callable")

        return errors
