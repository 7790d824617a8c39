"""Tests for the grid and column-packing placement strategies."""
import pytest

from simple_masonry.layout import placement
from simple_masonry.type_defs import Position, ScaledSize


class TestPlaceGrid:
    def test_row_height_is_tallest_item(self, make_resolved) -> None:
        """The next row starts below the tallest item of the previous one."""
        options = make_resolved(columns=3, width=300, collapsing=False)
        sizes = [
            ScaledSize(100, 50), ScaledSize(100, 120), ScaledSize(100, 80),
            ScaledSize(100, 10),
        ]
        assert placement.place_grid(sizes, options) == [
            Position(0, 0, 0), Position(100, 0, 1), Position(200, 0, 2),
            Position(0, 120, 0),
        ]

    def test_gutters(self, make_resolved) -> None:
        """Gutters separate columns and rows."""
        options = make_resolved(
            columns=2, width=210, gutter_x=10, gutter_y=5, collapsing=False,
        )
        sizes = [ScaledSize(100, 40)] * 2 + [ScaledSize(100, 60)] * 3
        positions = placement.place_grid(sizes, options)
        assert [(p.x, p.y) for p in positions] == [
            (0, 0), (110, 0), (0, 45), (110, 45), (0, 110),
        ]

    def test_partial_last_row(self, make_resolved) -> None:
        """A short final row uses columns from the left."""
        options = make_resolved(columns=4, width=400, collapsing=False)
        positions = placement.place_grid([ScaledSize(100, 100)] * 6, options)
        assert [p.column for p in positions] == [0, 1, 2, 3, 0, 1]
        assert [p.y for p in positions[4:]] == [100, 100]

    def test_empty(self, make_resolved) -> None:
        """No sizes produce no positions."""
        options = make_resolved(columns=3, width=300)
        assert placement.place_grid([], options) == []


class TestPlaceColumns:
    def test_shortest_column_receives_next_item(self, make_resolved) -> None:
        """Items drop into whichever column is currently shortest."""
        options = make_resolved(columns=2, width=200)
        sizes = [
            ScaledSize(100, 300), ScaledSize(100, 100), ScaledSize(100, 100),
            ScaledSize(100, 50),
        ]
        assert placement.place_columns(sizes, options) == [
            Position(0, 0, 0),
            Position(100, 0, 1),
            Position(100, 100, 1),
            Position(100, 200, 1),
        ]

    def test_ties_go_to_lowest_column(self, make_resolved) -> None:
        """Equal-height items fill columns left to right, row by row."""
        options = make_resolved(columns=3, width=300)
        positions = placement.place_columns([ScaledSize(100, 100)] * 7, options)
        assert [p.column for p in positions] == [0, 1, 2, 0, 1, 2, 0]

    def test_vertical_gutter_accumulates(self, make_resolved) -> None:
        """Stored column heights include the trailing vertical gutter."""
        options = make_resolved(columns=1, width=100, gutter_y=7)
        positions = placement.place_columns([ScaledSize(100, 10)] * 3, options)
        assert [p.y for p in positions] == [0, 17, 34]

    def test_state_is_reset_between_calls(self, make_resolved) -> None:
        """Column heights do not leak from one call into the next."""
        options = make_resolved(columns=2, width=200)
        sizes = [ScaledSize(100, 80), ScaledSize(100, 20)]
        assert (placement.place_columns(sizes, options)
                == placement.place_columns(sizes, options))


@pytest.mark.parametrize(
    ("heights", "expected"),
    [([0, 0, 0], 0), ([5, 1, 1], 1), ([3, 2, 1], 2), ([1.5, 1.5, 0.5], 2)],
)
def test_shortest_column(heights: list[float], expected: int) -> None:
    """The minimum is found and ties resolve to the lowest index."""
    assert placement.shortest_column(heights) == expected


def test_select_placer(make_resolved) -> None:
    """The collapsing flag selects the placement strategy."""
    packed = make_resolved(columns=2, width=200, collapsing=True)
    strict = make_resolved(columns=2, width=200, collapsing=False)
    assert placement.select_placer(packed) is placement.place_columns
    assert placement.select_placer(strict) is placement.place_grid
    assert placement.placement_mode(packed) == "columns"
    assert placement.placement_mode(strict) == "grid"
