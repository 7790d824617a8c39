"""Fit item sizes to the column width while keeping their aspect ratio."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from simple_masonry.config import ResolvedOptions, resolve_options
from simple_masonry.errors import InvalidDimensionError
from simple_masonry.type_defs import Dimension, ScaledSize


def check_dimension(dimension: Dimension, index: int | None = None) -> None:
    """Reject items whose width or height is not finite and positive."""
    width, height = dimension.width, dimension.height
    if all(math.isfinite(v) and v > 0 for v in (width, height)):
        return
    where = "" if index is None else f" at index {index}"
    msg = (
        f"Dimension{where} must have positive width and height, "
        f"got {dimension.width:g}x{dimension.height:g}"
    )
    raise InvalidDimensionError(msg, index=index)


def scale_dimension(
    dimension: Dimension,
    column_width: float,
    max_height: float | None = None,
) -> ScaledSize:
    """
    Scale one item uniformly so it fits the column and the height cap.

    The scale factor is the smaller of the width fit and, when
    ``max_height`` is set, the height fit, so neither bound is exceeded
    and the aspect ratio is unchanged.
    """
    scale = column_width / dimension.width
    if max_height is not None:
        scale = min(scale, max_height / dimension.height)
    return ScaledSize(dimension.width * scale, dimension.height * scale)


def scale_dimensions(options: ResolvedOptions) -> list[ScaledSize]:
    """Scale every item in input order, failing on the first bad one."""
    sizes: list[ScaledSize] = []
    for index, dimension in enumerate(options.dimensions):
        check_dimension(dimension, index)
        sizes.append(
            scale_dimension(dimension, options.column_width, options.max_height),
        )
    return sizes


def make_scaler(
    columns: int,
    width: float,
    gutter_x: float = 0.0,
    gutter_y: float = 0.0,
    *,
    max_height: float | None = None,
) -> Callable[[Dimension | Mapping[str, Any]], ScaledSize]:
    """
    Return a function that scales single dimensions for this grid.

    Useful when only sizes are needed, without placement. ``gutter_y``
    is accepted to mirror the full layout options; vertical spacing has
    no effect on item size.

    Raises:
        ConfigurationError: If the grid geometry is invalid.

    """
    options = resolve_options({
        "columns": columns,
        "width": width,
        "gutter_x": gutter_x,
        "gutter_y": gutter_y,
        "max_height": max_height,
    })

    def scale(dimension: Dimension | Mapping[str, Any]) -> ScaledSize:
        if not isinstance(dimension, Dimension):
            dimension = Dimension.model_validate(dimension)
        check_dimension(dimension)
        return scale_dimension(
            dimension, options.column_width, options.max_height,
        )

    return scale
