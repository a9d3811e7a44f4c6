"""Abstract interface for the document view an editor host provides."""

from typing import Protocol

from ..models.range import Position, Range


class LineView(Protocol):
    """A single line of a document as seen by the scope detectors."""

    @property
    def line_number(self) -> int:
        """Zero-based line number."""
        ...

    @property
    def text(self) -> str:
        """Line text without its terminator."""
        ...

    @property
    def is_empty_or_whitespace(self) -> bool:
        """Whether the line holds nothing but whitespace."""
        ...

    @property
    def first_non_whitespace_index(self) -> int:
        """Index of the first non-whitespace character."""
        ...


class DocumentView(Protocol):
    """Read-only, line-indexed view of a document snapshot.

    This protocol defines what the scope detectors consume from a host
    editor. ``TextDocument`` is the bundled implementation; hosts may pass
    any object with the same shape.

    The detectors never mutate the document and assume it does not change
    for the duration of a single call.
    """

    @property
    def line_count(self) -> int:
        """Number of lines (at least one)."""
        ...

    def line_at(self, line: int) -> LineView:
        """
        Return the line with the given number.

        Args:
            line: Zero-based line number in ``[0, line_count)``

        Returns:
            The line view

        Raises:
            IndexError: If the line number is outside the document
        """
        ...

    def offset_at(self, position: Position) -> int:
        """
        Convert a position into an offset into ``get_text()``.

        Positions outside the document are clamped.
        """
        ...

    def position_at(self, offset: int) -> Position:
        """
        Convert an offset into ``get_text()`` into a position.

        Offsets outside the text are clamped.
        """
        ...

    def get_text(self, text_range: Range | None = None) -> str:
        """
        Return the document text.

        Args:
            text_range: Optional range to restrict the text to

        Returns:
            The full text, or just the text covered by ``text_range``
        """
        ...
