"""Bracket pair matching.

Finds the innermost bracket pair around an offset. The four bracket kinds
(``()``, ``{}``, ``[]``, ``<>``) are balanced independently: a closing
bracket only cancels an opening bracket of its own kind, and the nearest
unbalanced opening bracket of any kind wins.

Unbalanced text is not an error. It simply yields no pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from scope_dimmer.models.range import Range

if TYPE_CHECKING:
    from scope_dimmer.interfaces.document import DocumentView

log = structlog.get_logger()

OPENING_BRACKETS: dict[str, str] = {"(": ")", "{": "}", "[": "]", "<": ">"}
CLOSING_BRACKETS: dict[str, str] = {close: open_ for open_, close in OPENING_BRACKETS.items()}


def find_enclosing_offsets(text: str, offset: int) -> tuple[int, int] | None:
    """Find the bracket pair enclosing ``offset`` in ``text``.

    The backward scan only looks at characters strictly before ``offset``.
    The forward scan starts at ``offset`` itself and tracks just the chosen
    bracket kind.

    Args:
        text: Full document text
        offset: Index into ``text``

    Returns:
        ``(open_index, close_index)`` of the pair, or None if there is no
        unbalanced opening bracket before ``offset`` or it is never closed

    Example:
        find_enclosing_offsets("f(a, [b])", 3)  # (1, 8)
    """
    offset = max(0, min(offset, len(text)))
    balance = dict.fromkeys(OPENING_BRACKETS, 0)

    opening: str | None = None
    open_index = -1
    for index in range(offset - 1, -1, -1):
        char = text[index]
        if char in OPENING_BRACKETS:
            balance[char] += 1
            if balance[char] == 1:
                opening = char
                open_index = index
                break
        elif char in CLOSING_BRACKETS:
            balance[CLOSING_BRACKETS[char]] -= 1

    if opening is None:
        return None

    closing = OPENING_BRACKETS[opening]
    depth = 1
    for index in range(offset, len(text)):
        char = text[index]
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return (open_index, index)

    return None


def find_enclosing_brackets(document: DocumentView, offset: int) -> Range | None:
    """Find the range of the bracket pair enclosing ``offset``.

    The range starts at the opening bracket and ends just past the closing
    bracket, so both brackets are inside it.

    Args:
        document: Document to scan
        offset: Offset into ``document.get_text()``

    Returns:
        Range of the pair, or None if no balanced pair encloses the offset
    """
    pair = find_enclosing_offsets(document.get_text(), offset)
    if pair is None:
        log.debug("bracket_pair_not_found", offset=offset)
        return None

    open_index, close_index = pair
    return Range(document.position_at(open_index), document.position_at(close_index + 1))
