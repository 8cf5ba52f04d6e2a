"""Exceptions raised by FoldTree.

The tree operations and validators never raise. These exceptions belong to
the trust-boundary helpers only: decoding untrusted data and building a
renderer from options.
"""


class FoldTreeError(Exception):
    """Base class for all FoldTree errors."""
    pass


class TreeFormatError(FoldTreeError, ValueError):
    """Raised when structural data does not describe a valid tree value."""
    pass


class RendererConfigError(FoldTreeError, ValueError):
    """Raised when renderer options can't be used to render items."""
    pass
