"""Exception types raised by the layout engine."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for errors raised while computing a layout."""


class ConfigurationError(LayoutError):
    """Layout options cannot produce a usable column grid."""


class InvalidDimensionError(LayoutError):
    """
    An item has a non-positive width or height.

    ``index`` is the position of the offending item in ``dimensions``, or
    ``None`` when a single dimension was scaled on its own.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
