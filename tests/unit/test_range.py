"""Tests for Position and Range models."""

import pytest

from scope_dimmer.models.range import END_OF_LINE, Position, Range


class TestPosition:
    """Tests for Position ordering and serialization."""

    def test_ordering_is_lexicographic(self) -> None:
        """Test that line dominates character when comparing."""
        assert Position(1, 0) > Position(0, 99)
        assert Position(2, 3) < Position(2, 4)
        assert Position(2, 3) == Position(2, 3)

    def test_to_dict(self) -> None:
        """Test serialization to a plain dict."""
        assert Position(3, 7).to_dict() == {"line": 3, "character": 7}


class TestRange:
    """Tests for Range construction and containment."""

    def test_from_coords(self) -> None:
        """Test building a range from four coordinates."""
        r = Range.from_coords(1, 2, 3, 4)
        assert r.start == Position(1, 2)
        assert r.end == Position(3, 4)

    def test_reversed_endpoints_are_swapped(self) -> None:
        """Test that a range is always ordered."""
        r = Range(Position(5, 0), Position(2, 1))
        assert r.start == Position(2, 1)
        assert r.end == Position(5, 0)

    def test_equality(self) -> None:
        """Test that ranges are equal iff start and end are equal."""
        assert Range.from_coords(0, 0, 1, 1) == Range.from_coords(0, 0, 1, 1)
        assert Range.from_coords(0, 0, 1, 1) != Range.from_coords(0, 0, 1, 2)

    def test_ranges_are_hashable(self) -> None:
        """Test that equal ranges hash equally."""
        assert len({Range.from_coords(0, 0, 1, 1), Range.from_coords(0, 0, 1, 1)}) == 1

    def test_contains_range(self) -> None:
        """Test containment of ranges with inclusive bounds."""
        outer = Range.from_coords(1, 0, 5, END_OF_LINE)
        assert outer.contains(Range.from_coords(2, 4, 3, 1))
        assert outer.contains(outer)
        assert outer.contains(Range.from_coords(1, 0, 5, 10))
        assert not outer.contains(Range.from_coords(0, 9, 3, 1))
        assert not outer.contains(Range.from_coords(2, 0, 6, 0))

    def test_contains_position(self) -> None:
        """Test containment of positions."""
        r = Range.from_coords(1, 4, 1, 9)
        assert r.contains(Position(1, 4))
        assert r.contains(Position(1, 9))
        assert not r.contains(Position(1, 10))

    def test_strictly_contains(self) -> None:
        """Test that strict containment excludes the range itself."""
        outer = Range.from_coords(0, 0, 4, 1)
        assert outer.strictly_contains(Range.from_coords(1, 0, 2, 0))
        assert not outer.strictly_contains(outer)

    @pytest.mark.parametrize(
        ("r", "single_line"),
        [
            (Range.from_coords(2, 0, 2, 8), True),
            (Range.from_coords(2, 0, 3, 0), False),
        ],
    )
    def test_is_single_line(self, r: Range, single_line: bool) -> None:
        """Test single-line detection."""
        assert r.is_single_line is single_line

    def test_is_empty(self) -> None:
        """Test empty range detection."""
        assert Range.from_coords(1, 1, 1, 1).is_empty
        assert not Range.from_coords(1, 1, 1, 2).is_empty

    def test_to_dict(self) -> None:
        """Test serialization to a plain dict."""
        assert Range.from_coords(0, 1, 2, 3).to_dict() == {
            "start": {"line": 0, "character": 1},
            "end": {"line": 2, "character": 3},
        }
