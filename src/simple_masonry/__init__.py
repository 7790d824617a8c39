"""Public package exports for the masonry layout engine."""

from __future__ import annotations

from .config import LayoutOptions, ResolvedOptions, resolve_options
from .errors import ConfigurationError, InvalidDimensionError, LayoutError
from .layout import generate_rectangles, layout_height, make_scaler
from .type_defs import Dimension, Rectangle, ScaledSize

__all__ = [
    "ConfigurationError",
    "Dimension",
    "InvalidDimensionError",
    "LayoutError",
    "LayoutOptions",
    "Rectangle",
    "ResolvedOptions",
    "ScaledSize",
    "generate_rectangles",
    "layout_height",
    "make_scaler",
    "resolve_options",
]
