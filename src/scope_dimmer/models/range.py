"""Data models for document positions and ranges."""

import sys
from dataclasses import dataclass
from typing import Any

# Column sentinel meaning "through the end of the line".
END_OF_LINE = sys.maxsize


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based (line, character) location in a document.

    ``character`` is measured in UTF-16 code units, as editor hosts report it.
    Ordering is lexicographic on (line, character).
    """

    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        """Serialize to a plain dict."""
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    """A span between two positions.

    If ``end`` is before ``start`` the endpoints are swapped, so a range is
    always ordered.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def from_coords(
        cls,
        start_line: int,
        start_character: int,
        end_line: int,
        end_character: int,
    ) -> "Range":
        """Build a range from four coordinates."""
        return cls(Position(start_line, start_character), Position(end_line, end_character))

    @property
    def is_single_line(self) -> bool:
        """Whether start and end are on the same line."""
        return self.start.line == self.end.line

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, other: "Range | Position") -> bool:
        """Check whether ``other`` lies within this range (inclusive bounds)."""
        if isinstance(other, Position):
            return self.start <= other <= self.end
        return other.start >= self.start and other.end <= self.end

    def strictly_contains(self, other: "Range") -> bool:
        """Check containment where ``other`` is a proper sub-range."""
        return self.contains(other) and other != self

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}
