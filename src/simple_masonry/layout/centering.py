"""Horizontal centering for a row that holds fewer items than columns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from simple_masonry.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from simple_masonry.config import ResolvedOptions
    from simple_masonry.type_defs import Position


def incomplete_group(count: int, columns: int, *, collapsing: bool) -> range:
    """
    Return the indices of the under-full group, or an empty range.

    In grid mode this is the final row when it holds fewer than
    ``columns`` items. Packed columns have no rows, so only a layout
    with fewer items than columns qualifies.
    """
    if count == 0:
        return range(0)
    if collapsing:
        return range(count) if count < columns else range(0)
    start = (count - 1) // columns * columns
    if count - start < columns:
        return range(start, count)
    return range(0)


def center_incomplete_group(
    positions: Sequence[Position],
    options: ResolvedOptions,
) -> list[Position]:
    """Shift the under-full group right by half of its unused width."""
    centered = list(positions)
    group = incomplete_group(
        len(positions), options.columns, collapsing=options.collapsing,
    )
    if not group:
        return centered

    offset = (options.columns - len(group)) * options.column_width / 2
    logger.debug(
        "Centering %d trailing item(s) by %.2f", len(group), offset,
    )
    for index in group:
        centered[index] = centered[index]._replace(x=centered[index].x + offset)
    return centered
