"""Indentation-based block detection.

This module finds the indentation block around a line:
- ``indent_width`` measures leading whitespace with tabs expanded
- ``find_top`` walks upward to the nearest strictly shallower line
- ``find_bot`` walks downward to the first line shallower than the cursor's
- ``indent_block`` combines both into a whole-line range

Blank lines never terminate a walk. All walks are clamped to the document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache, cached

from scope_dimmer.models.range import END_OF_LINE, Range

if TYPE_CHECKING:
    from scope_dimmer.interfaces.document import DocumentView, LineView


@cached(cache=LRUCache(maxsize=4096))
def _leading_width(leading: str, tab_width: int) -> int:
    return len(leading) + leading.count("\t") * (tab_width - 1)


def indent_width(text: str, tab_width: int) -> int:
    """Return the indentation width of a line.

    Every leading whitespace character counts as one column, except tabs
    which count as ``tab_width`` columns. A blank line measures its whole
    whitespace run.

    Args:
        text: Line text
        tab_width: Columns per tab character (>= 1)

    Returns:
        Indentation width in columns

    Example:
        indent_width("\\t  x", 4)  # 6
    """
    stripped = text.lstrip()
    # Keyed on the whitespace prefix itself, so edits can never leave it stale.
    return _leading_width(text[: len(text) - len(stripped)], tab_width)


def _clamp_line(document: DocumentView, line: int) -> int:
    return max(0, min(line, document.line_count - 1))


def find_top(document: DocumentView, from_line: int, tab_width: int) -> LineView:
    """Find the first line of the indentation block containing ``from_line``.

    Starting from the nearest non-blank line at or above ``from_line``, the
    walk keeps the first sampled width as its baseline and stops at the
    first line that is at column 0 or strictly shallower than that baseline.
    Line 0 is returned when nothing stops the walk earlier.

    Args:
        document: Document to scan
        from_line: Line to start from (usually the cursor line)
        tab_width: Columns per tab character

    Returns:
        The block's top line
    """
    line = document.line_at(_clamp_line(document, from_line))

    # A blank cursor line belongs to whatever is above it.
    while line.is_empty_or_whitespace and line.line_number > 0:
        line = document.line_at(line.line_number - 1)

    baseline: int | None = None
    while line.line_number > 0:
        if not line.is_empty_or_whitespace:
            width = indent_width(line.text, tab_width)
            if baseline is None:
                baseline = width
            if width == 0 or width < baseline:
                return line
        line = document.line_at(line.line_number - 1)

    return line


def find_bot(
    document: DocumentView,
    top_line: int,
    reference_line: int,
    tab_width: int,
) -> LineView:
    """Find the last line of the indentation block that starts at ``top_line``.

    The walk starts one line below ``top_line`` and stops at the first
    non-blank line that is at column 0 or shallower than ``reference_line``.
    The last document line is returned when nothing stops the walk earlier.

    Args:
        document: Document to scan
        top_line: Block's top line number
        reference_line: Line whose width is the baseline (usually the cursor line)
        tab_width: Columns per tab character

    Returns:
        The block's bottom line
    """
    last = document.line_count - 1
    baseline = indent_width(document.line_at(_clamp_line(document, reference_line)).text, tab_width)
    line = document.line_at(_clamp_line(document, top_line + 1))

    while line.line_number < last:
        if not line.is_empty_or_whitespace:
            width = indent_width(line.text, tab_width)
            if width < baseline or width == 0:
                return line
        line = document.line_at(line.line_number + 1)

    return line


def indent_block(document: DocumentView, line: int, tab_width: int) -> Range:
    """Return the whole-line range of the indentation block around ``line``."""
    top = find_top(document, line, tab_width)
    bot = find_bot(document, top.line_number, line, tab_width)
    return Range.from_coords(top.line_number, 0, bot.line_number, END_OF_LINE)
