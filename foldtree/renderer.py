"""Rendering of visible items into display lines.

Renderers turn the flat output of ``get_visible_items`` into one string per
item. They never see the tree itself, so the same renderer works for any
item list, including hand-built ones.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .config import RendererOptions
from .core.item import TreeItem, TreeLeafItem
from .errors import RendererConfigError

logger = logging.getLogger(__name__)


class Renderer(ABC):
    """Abstract base class for item renderers.

    Implementations map each item to exactly one line, keeping order.
    """

    @abstractmethod
    def render(self, items: Sequence[TreeItem]) -> List[str]:
        """Render items into display lines.

        Args:
            items: Visible items in display order

        Returns:
            One string per item, in the same order
        """
        pass


class DefaultRenderer(Renderer):
    """Renderer with configurable indentation and symbols.

    Each line is ``indent * depth(item) + symbol + label``. The root item
    (empty path) always uses ``root_symbol``; other items use the leaf or
    branch symbol, which may be computed per item.

    Example:
        >>> from foldtree import TreeBranchItem, TreeLeafItem
        >>> renderer = DefaultRenderer()
        >>> renderer.render([
        ...     TreeBranchItem("project", "project", (), False),
        ...     TreeBranchItem("src", "src", ("src",), False),
        ...     TreeLeafItem("index.py", "index", ("src", "index")),
        ...     TreeBranchItem("utils", "utils", ("src", "utils"), True),
        ... ])
        ['project', '|- src', ' |  index.py', ' |+ utils']
    """

    def __init__(self, options: Optional[RendererOptions] = None, **overrides):
        """Create a renderer.

        Args:
            options: Base options (defaults to ``RendererOptions()``)
            **overrides: Individual options replacing those in ``options``

        Raises:
            RendererConfigError: If an override is unknown or the merged
                options are invalid
        """
        base = options if options is not None else RendererOptions()

        unknown = sorted(set(overrides) - set(RendererOptions.option_names()))
        if unknown:
            raise RendererConfigError(f"Unknown renderer options: {', '.join(unknown)}")

        self.options = base.merged(**overrides) if overrides else base

        config_errors = self.options.validate()
        if config_errors:
            raise RendererConfigError(
                f"Invalid renderer options: {'; '.join(config_errors)}"
            )

    def symbol_for(self, item: TreeItem) -> str:
        """Resolve the symbol placed before ``item``'s label."""
        if item.is_root:
            return self.options.root_symbol

        if isinstance(item, TreeLeafItem):
            symbol = self.options.leaf_symbol
        else:
            symbol = self.options.branch_symbol

        return symbol if isinstance(symbol, str) else symbol(item)

    def render_line(self, item: TreeItem) -> str:
        """Render a single item."""
        indent = self.options.indent * self.options.depth(item)
        return f"{indent}{self.symbol_for(item)}{item.label}"

    def render(self, items: Sequence[TreeItem]) -> List[str]:
        lines = [self.render_line(item) for item in items]
        logger.debug("Rendered %d items", len(lines))
        return lines
