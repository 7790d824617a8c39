"""
Entry point that turns layout options into positioned rectangles.

Runs the stages in order: resolve options, scale every item, place the
scaled items, center an under-full group, then hand each rectangle to
the optional ``customize`` callback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from simple_masonry.config import resolve_options, validate_options
from simple_masonry.layout.centering import center_incomplete_group
from simple_masonry.layout.placement import placement_mode, select_placer
from simple_masonry.layout.scaling import scale_dimensions
from simple_masonry.logging_utils import logger
from simple_masonry.type_defs import Rectangle

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping, Sequence

    from simple_masonry.config import LayoutOptions, ResolvedOptions


def apply_customize(
    rectangles: list[Rectangle],
    options: ResolvedOptions,
) -> list[Rectangle]:
    """
    Give the ``customize`` callback a chance to replace each rectangle.

    The callback sees the positioned rectangles, not earlier
    replacements. Exceptions raised by it propagate unchanged.
    """
    customize = options.customize
    if customize is None:
        return rectangles

    customized = list(rectangles)
    for index, rectangle in enumerate(rectangles):
        replacement = customize(rectangle, index, rectangles, options)
        if replacement is not None:
            customized[index] = replacement
    return customized


def generate_rectangles(
    options: LayoutOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> list[Rectangle]:
    """
    Lay out ``dimensions`` in a fixed-width, multi-column container.

    Options may be given as a :class:`LayoutOptions`, a mapping, keyword
    arguments, or a mix where keywords win. The result has one rectangle
    per input dimension, in input order, each carrying the extra fields
    of its source dimension.

    Raises:
        ConfigurationError: If the options are invalid.
        InvalidDimensionError: If any item has a non-positive size.

    """
    resolved = resolve_options(validate_options(options, **overrides))
    logger.debug(
        "Laying out %d item(s): %s placement, %d columns of width %.2f",
        len(resolved.dimensions),
        placement_mode(resolved),
        resolved.columns,
        resolved.column_width,
    )

    sizes = scale_dimensions(resolved)
    positions = select_placer(resolved)(sizes, resolved)
    if resolved.centering:
        positions = center_incomplete_group(positions, resolved)

    rectangles = [
        Rectangle(
            x=position.x,
            y=position.y,
            width=size.width,
            height=size.height,
            extras=dimension.extras,
        )
        for dimension, size, position in zip(
            resolved.dimensions, sizes, positions, strict=True,
        )
    ]
    return apply_customize(rectangles, resolved)


def layout_height(rectangles: Sequence[Rectangle]) -> float:
    """Height of the container needed to show every rectangle."""
    return max((r.y + r.height for r in rectangles), default=0.0)
