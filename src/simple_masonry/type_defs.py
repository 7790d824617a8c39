"""
Defines shared types for the masonry layout engine.

Centralizes the input and output records and the small value types
passed between the scaling, placement, and centering stages.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict

PlacementMode = Literal["grid", "columns"]

# Called as customize(rectangle, index, all_rectangles, resolved_options).
# A non-None return value replaces the rectangle at that index.
CustomizeCallback = Callable[..., Any]


class Dimension(BaseModel):
    """
    Original size of one item to lay out.

    Any extra fields (an ordering tag, a file path, ...) are kept verbatim
    and copied onto the output rectangle without being inspected.
    """

    model_config = ConfigDict(extra="allow")

    width: float
    height: float

    @property
    def extras(self) -> dict[str, Any]:
        """Return a shallow copy of the caller-supplied extra fields."""
        return dict(self.model_extra or {})


class ScaledSize(NamedTuple):
    """Item size after fitting it to the column width."""

    width: float
    height: float


class Position(NamedTuple):
    """Top-left corner assigned to an item and the column it landed in."""

    x: float
    y: float
    column: int


@dataclass(slots=True)
class Rectangle:
    """Positioned item returned to the caller."""

    x: float
    y: float
    width: float
    height: float
    extras: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten extras next to the geometry; geometry keys win."""
        return {
            **self.extras,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
