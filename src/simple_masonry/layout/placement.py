"""
Placement strategies that assign a top-left corner to each scaled item.

Two strategies are available:

- ``grid``: strict row-major placement where every row is as tall as its
  tallest item.
- ``columns``: masonry packing where each item drops into the currently
  shortest column.

Both return one :class:`Position` per input size, in input order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from simple_masonry.type_defs import PlacementMode, Position

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from simple_masonry.config import ResolvedOptions
    from simple_masonry.type_defs import ScaledSize

    Placer = Callable[[Sequence[ScaledSize], ResolvedOptions], list[Position]]


def column_x(column: int, options: ResolvedOptions) -> float:
    """Return the left edge of ``column``."""
    return column * (options.column_width + options.gutter_x)


def place_grid(
    sizes: Sequence[ScaledSize],
    options: ResolvedOptions,
) -> list[Position]:
    """Place items row by row; item ``i`` lands in column ``i % columns``."""
    columns = options.columns
    positions: list[Position] = []
    row_y = 0.0
    for row_start in range(0, len(sizes), columns):
        row = sizes[row_start:row_start + columns]
        positions.extend(
            Position(column_x(column, options), row_y, column)
            for column in range(len(row))
        )
        row_y += max(size.height for size in row) + options.gutter_y
    return positions


def shortest_column(heights: Sequence[float]) -> int:
    """Index of the shortest column; the lowest index wins ties."""
    return min(range(len(heights)), key=heights.__getitem__)


def place_columns(
    sizes: Sequence[ScaledSize],
    options: ResolvedOptions,
) -> list[Position]:
    """Greedily drop each item into the currently shortest column."""
    # Each stored height already includes the trailing gutter.
    heights = [0.0] * options.columns
    positions: list[Position] = []
    for size in sizes:
        column = shortest_column(heights)
        positions.append(
            Position(column_x(column, options), heights[column], column),
        )
        heights[column] += size.height + options.gutter_y
    return positions


def placement_mode(options: ResolvedOptions) -> PlacementMode:
    """Name the strategy selected by ``options.collapsing``."""
    return "columns" if options.collapsing else "grid"


def select_placer(options: ResolvedOptions) -> Placer:
    """Return the placement function for ``options``."""
    placers: dict[PlacementMode, Placer] = {
        "grid": place_grid,
        "columns": place_columns,
    }
    return placers[placement_mode(options)]
