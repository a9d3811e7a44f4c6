"""Tests for the TextDocument snapshot."""

from pathlib import Path

import pytest

from scope_dimmer.models.document import TextDocument, TextLine, utf16_length, utf16_to_index
from scope_dimmer.models.range import END_OF_LINE, Position, Range


class TestTextLine:
    """Tests for TextLine derived properties."""

    def test_blank_line(self) -> None:
        """Test that whitespace-only lines are blank."""
        line = TextLine(0, " \t ")
        assert line.is_empty_or_whitespace is True
        assert line.first_non_whitespace_index == 3

    def test_empty_line(self) -> None:
        """Test that an empty line is blank."""
        assert TextLine(0, "").is_empty_or_whitespace is True

    def test_content_line(self) -> None:
        """Test the first non-whitespace index of an indented line."""
        line = TextLine(4, "\t x = 1")
        assert line.is_empty_or_whitespace is False
        assert line.first_non_whitespace_index == 2

    def test_length_counts_utf16_units(self) -> None:
        """Test that astral characters count as two units."""
        assert TextLine(0, "a\U0001f600b").length == 4


class TestUtf16Helpers:
    """Tests for UTF-16 column conversion."""

    def test_ascii_length(self) -> None:
        assert utf16_length("hello") == 5

    def test_astral_length(self) -> None:
        assert utf16_length("\U0001f600") == 2

    def test_index_after_astral_character(self) -> None:
        """Test that columns after a surrogate pair map back to string indexes."""
        text = "'\U0001f600', x"
        assert utf16_to_index(text, 0) == 0
        assert utf16_to_index(text, 3) == 2
        assert utf16_to_index(text, 6) == 5

    def test_index_clamped_to_line(self) -> None:
        assert utf16_to_index("abc", 99) == 3
        assert utf16_to_index("\U0001f600", 99) == 1


class TestTextDocumentLines:
    """Tests for line splitting."""

    def test_lf_lines(self) -> None:
        """Test splitting on newlines, keeping the trailing empty line."""
        doc = TextDocument("a\nb\n")
        assert doc.line_count == 3
        assert [doc.line_at(i).text for i in range(3)] == ["a", "b", ""]

    def test_mixed_line_endings(self) -> None:
        """Test that CRLF, CR and LF all terminate lines."""
        doc = TextDocument("a\r\nb\rc\nd")
        assert [doc.line_at(i).text for i in range(doc.line_count)] == ["a", "b", "c", "d"]

    def test_empty_document_has_one_line(self) -> None:
        """Test that an empty document still has a single empty line."""
        doc = TextDocument("")
        assert doc.line_count == 1
        assert doc.line_at(0).text == ""

    def test_line_at_position(self) -> None:
        """Test looking up a line by position."""
        doc = TextDocument("a\nbb")
        assert doc.line_at(Position(1, 1)).text == "bb"

    def test_line_at_out_of_range_raises(self) -> None:
        """Test that an invalid line number raises IndexError."""
        doc = TextDocument("a\nb")
        with pytest.raises(IndexError):
            doc.line_at(2)
        with pytest.raises(IndexError):
            doc.line_at(-1)

    def test_line_numbers(self) -> None:
        doc = TextDocument("x\ny\nz")
        assert doc.line_at(2).line_number == 2


class TestTextDocumentOffsets:
    """Tests for offset and position conversion."""

    def test_offset_at(self) -> None:
        """Test converting positions to offsets."""
        doc = TextDocument("def f():\n    return 1\n")
        assert doc.offset_at(Position(0, 0)) == 0
        assert doc.offset_at(Position(1, 4)) == 13

    def test_offset_at_counts_crlf(self) -> None:
        """Test that both CRLF characters are counted."""
        doc = TextDocument("a\r\nb\rc")
        assert doc.offset_at(Position(1, 0)) == 3
        assert doc.offset_at(Position(2, 0)) == 5

    def test_offset_at_clamps_end_of_line(self) -> None:
        """Test that END_OF_LINE resolves to the end of the line."""
        doc = TextDocument("abc\ndef")
        assert doc.offset_at(Position(0, END_OF_LINE)) == 3

    def test_position_at(self) -> None:
        """Test converting offsets to positions."""
        doc = TextDocument("def f():\n    return 1\n")
        assert doc.position_at(0) == Position(0, 0)
        assert doc.position_at(13) == Position(1, 4)
        assert doc.position_at(22) == Position(2, 0)

    def test_position_at_inside_crlf(self) -> None:
        """Test that an offset between CR and LF maps to the end of the line."""
        doc = TextDocument("a\r\nb")
        assert doc.position_at(2) == Position(0, 1)

    def test_position_at_clamps(self) -> None:
        """Test that out-of-range offsets are clamped."""
        doc = TextDocument("ab\ncd")
        assert doc.position_at(-5) == Position(0, 0)
        assert doc.position_at(100) == Position(1, 2)

    def test_astral_characters(self) -> None:
        """Test that offsets and positions agree across surrogate pairs."""
        doc = TextDocument("x = '\U0001f600' + y")
        offset = doc.offset_at(Position(0, 9))
        assert doc.get_text()[offset] == "+"
        assert doc.position_at(offset) == Position(0, 9)


class TestTextDocumentValidation:
    """Tests for position and range clamping."""

    def test_validate_position_inside(self) -> None:
        doc = TextDocument("abc")
        assert doc.validate_position(Position(0, 2)) == Position(0, 2)

    def test_validate_position_past_line_end(self) -> None:
        doc = TextDocument("abc\nde")
        assert doc.validate_position(Position(0, 10)) == Position(0, 3)

    def test_validate_position_before_start(self) -> None:
        doc = TextDocument("abc")
        assert doc.validate_position(Position(-1, 5)) == Position(0, 0)

    def test_validate_position_past_last_line(self) -> None:
        doc = TextDocument("abc\nde")
        assert doc.validate_position(Position(9, 0)) == Position(1, 2)

    def test_validate_range(self) -> None:
        """Test that END_OF_LINE ranges resolve to real coordinates."""
        doc = TextDocument("ab\ncdef\n")
        clamped = doc.validate_range(Range.from_coords(0, 0, 1, END_OF_LINE))
        assert clamped == Range.from_coords(0, 0, 1, 4)

    def test_get_text_range(self) -> None:
        """Test extracting the text covered by a range."""
        doc = TextDocument("ab\ncdef\n")
        assert doc.get_text(Range.from_coords(0, 1, 1, 2)) == "b\ncd"
        assert doc.get_text() == "ab\ncdef\n"


class TestTextDocumentFromPath:
    """Tests for loading documents from disk."""

    def test_from_path_preserves_line_endings(self, tmp_path: Path) -> None:
        """Test that CRLF terminators are not translated on load."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"a\r\nb\r\n")
        doc = TextDocument.from_path(path)
        assert doc.get_text() == "a\r\nb\r\n"
        assert doc.line_count == 3
        assert doc.uri == str(path)

    def test_from_path_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            TextDocument.from_path(tmp_path / "missing.txt")

    def test_repr(self) -> None:
        doc = TextDocument("a\nb", uri="mem://a", version=3)
        assert repr(doc) == "TextDocument(uri='mem://a', lines=2, version=3)"
