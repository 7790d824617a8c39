"""
Layout stages split into scaling, placement, centering, and the engine.

The package exposes the entry points directly so callers rarely need
the individual submodules.
"""

from __future__ import annotations

from . import centering, engine, placement, scaling
from .centering import center_incomplete_group, incomplete_group
from .engine import apply_customize, generate_rectangles, layout_height
from .placement import place_columns, place_grid, select_placer
from .scaling import make_scaler, scale_dimension, scale_dimensions

__all__ = [
    "apply_customize",
    "center_incomplete_group",
    "centering",
    "engine",
    "generate_rectangles",
    "incomplete_group",
    "layout_height",
    "make_scaler",
    "place_columns",
    "place_grid",
    "placement",
    "scale_dimension",
    "scale_dimensions",
    "scaling",
    "select_placer",
]
