"""Read-only text document snapshot used by the scope detectors.

Lines are split on ``\\n``, ``\\r\\n`` and ``\\r``. Offsets index into the
original text (line terminators included), while ``Position.character``
counts UTF-16 code units the way editor hosts do.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path

from scope_dimmer.models.range import Position, Range

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""
    if text.isascii():
        return len(text)
    return sum(2 if ord(char) > 0xFFFF else 1 for char in text)


def utf16_to_index(text: str, units: int) -> int:
    """Convert a UTF-16 column into an index into ``text``.

    Columns past the end of the line clamp to ``len(text)``. A column that
    lands inside a surrogate pair resolves to the index after that character.
    """
    if units <= 0:
        return 0
    if text.isascii():
        return min(units, len(text))

    count = 0
    for index, char in enumerate(text):
        if count >= units:
            return index
        count += 2 if ord(char) > 0xFFFF else 1
    return len(text)


@dataclass(frozen=True)
class TextLine:
    """A single line of a document, without its terminator."""

    line_number: int
    text: str

    @property
    def first_non_whitespace_index(self) -> int:
        """Index of the first non-whitespace character (``len(text)`` if none)."""
        return len(self.text) - len(self.text.lstrip())

    @property
    def is_empty_or_whitespace(self) -> bool:
        """True when the line holds nothing but whitespace."""
        return self.first_non_whitespace_index == len(self.text)

    @property
    def length(self) -> int:
        """Line length in UTF-16 code units."""
        return utf16_length(self.text)


class TextDocument:
    """Immutable snapshot of a document's text.

    Example:
        doc = TextDocument("def f():\\n    return 1\\n", uri="example.py")
        doc.line_at(1).text          # "    return 1"
        doc.offset_at(Position(1, 4))  # 13
    """

    def __init__(self, text: str, uri: str = "untitled", version: int = 0) -> None:
        """Initialize the document.

        Args:
            text: Full document text
            uri: Identity of the document (file path or editor URI)
            version: Host-provided version counter
        """
        self._text = text
        self.uri = uri
        self.version = version

        starts = [0]
        ends: list[int] = []
        for match in _LINE_BREAK.finditer(text):
            ends.append(match.start())
            starts.append(match.end())
        ends.append(len(text))

        self._line_starts = starts
        self._line_ends = ends
        self._lines = tuple(
            TextLine(number, text[start:end])
            for number, (start, end) in enumerate(zip(starts, ends, strict=True))
        )

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> TextDocument:
        """Load a document from disk, preserving its line terminators."""
        with path.open(encoding=encoding, newline="") as f:
            return cls(f.read(), uri=str(path))

    def __repr__(self) -> str:
        return f"TextDocument(uri={self.uri!r}, lines={self.line_count}, version={self.version})"

    @property
    def line_count(self) -> int:
        """Number of lines (an empty document has one empty line)."""
        return len(self._lines)

    def line_at(self, line: int | Position) -> TextLine:
        """Return the line with the given number (or containing a position).

        Raises:
            IndexError: If the line number is outside the document
        """
        number = line.line if isinstance(line, Position) else line
        if number < 0 or number >= len(self._lines):
            raise IndexError(f"Line {number} outside document of {len(self._lines)} lines")
        return self._lines[number]

    def get_text(self, text_range: Range | None = None) -> str:
        """Return the full text, or the text covered by ``text_range``."""
        if text_range is None:
            return self._text
        return self._text[self.offset_at(text_range.start) : self.offset_at(text_range.end)]

    def offset_at(self, position: Position) -> int:
        """Convert a position into an offset into ``get_text()``."""
        position = self.validate_position(position)
        line = self._lines[position.line]
        return self._line_starts[position.line] + utf16_to_index(line.text, position.character)

    def position_at(self, offset: int) -> Position:
        """Convert an offset into ``get_text()`` into a position."""
        offset = max(0, min(offset, len(self._text)))
        number = bisect_right(self._line_starts, offset) - 1
        # Offsets inside a line terminator map to the end of that line.
        offset = min(offset, self._line_ends[number])
        start = self._line_starts[number]
        return Position(number, utf16_length(self._text[start:offset]))

    def validate_position(self, position: Position) -> Position:
        """Clamp a position to real document coordinates."""
        if position.line < 0:
            return Position(0, 0)
        if position.line >= len(self._lines):
            last = self._lines[-1]
            return Position(last.line_number, last.length)

        length = self._lines[position.line].length
        character = max(0, min(position.character, length))
        if character == position.character:
            return position
        return Position(position.line, character)

    def validate_range(self, text_range: Range) -> Range:
        """Clamp both ends of a range, e.g. to resolve ``END_OF_LINE``."""
        return Range(
            self.validate_position(text_range.start), self.validate_position(text_range.end)
        )
