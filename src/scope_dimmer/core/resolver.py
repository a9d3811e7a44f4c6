"""Scope resolution for a cursor position.

Combines the indentation and bracket detectors according to the dimming
reason:
- ``indent``: the indentation block around the cursor line
- ``brackets``: the innermost bracket pair around the cursor, else nothing
- ``indentAndBrackets``: the bracket pair if one exists, else the block

A non-blank line at column 0 is a root statement. Outside ``brackets``
mode it has no scope, since the whole file is its context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from scope_dimmer.core.brackets import find_enclosing_brackets
from scope_dimmer.core.indentation import indent_block, indent_width
from scope_dimmer.models.range import Position, Range
from scope_dimmer.models.scope import DimmingReason

if TYPE_CHECKING:
    from scope_dimmer.interfaces.document import DocumentView

log = structlog.get_logger()


def clamp_position(document: DocumentView, position: Position) -> Position:
    """Clamp a position's line into the document.

    Characters are left alone; ``offset_at`` clamps them.
    """
    line = max(0, min(position.line, document.line_count - 1))
    character = max(0, position.character)
    if line == position.line and character == position.character:
        return position
    return Position(line, character)


def is_root_statement(document: DocumentView, line: int, tab_width: int) -> bool:
    """Whether ``line`` is a non-blank line at column 0."""
    text_line = document.line_at(line)
    return not text_line.is_empty_or_whitespace and indent_width(text_line.text, tab_width) == 0


def resolve(
    document: DocumentView,
    cursor: Position,
    mode: DimmingReason | str,
    tab_width: int,
) -> Range | None:
    """Resolve the scope around a cursor.

    The cursor is assumed to be a collapsed, single-line selection; callers
    gate multi-line selections before calling.

    Args:
        document: Document snapshot
        cursor: Cursor position
        mode: Dimming reason (enum or its string value)
        tab_width: Columns per tab character

    Returns:
        The scope range, or None when there is no scope to narrow to
    """
    mode = DimmingReason(mode)
    cursor = clamp_position(document, cursor)

    if mode.uses_indent and is_root_statement(document, cursor.line, tab_width):
        log.debug("root_statement", line=cursor.line)
        return None

    if not mode.uses_brackets:
        return indent_block(document, cursor.line, tab_width)

    bracket_range = find_enclosing_brackets(document, document.offset_at(cursor))
    if bracket_range is not None:
        return bracket_range

    if mode is DimmingReason.BRACKETS:
        return None

    return indent_block(document, cursor.line, tab_width)
