"""Geometry of the text a host de-emphasizes around a scope."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scope_dimmer.models.range import Position, Range
from scope_dimmer.models.scope import DimmingReason

if TYPE_CHECKING:
    from scope_dimmer.interfaces.document import DocumentView


def focus_range(scope: Range, mode: DimmingReason | str) -> Range:
    """Return the range kept in focus for ``scope``.

    Outside ``brackets`` mode a multi-line scope is widened to column 0 of
    its first line, so the opening line is not half dimmed.
    """
    if DimmingReason(mode) is not DimmingReason.BRACKETS and not scope.is_single_line:
        return Range.from_coords(scope.start.line, 0, scope.end.line, scope.end.character)
    return scope


def dim_ranges(
    document: DocumentView,
    scope: Range | None,
    mode: DimmingReason | str,
) -> list[Range]:
    """Return the ranges outside ``scope``, clamped to the document.

    Args:
        document: Document snapshot
        scope: Scope to keep in focus, or None
        mode: Dimming reason

    Returns:
        Non-empty ranges before and after the focus range; empty when
        there is no scope
    """
    if scope is None:
        return []

    focus = focus_range(scope, mode)
    text = document.get_text()
    start = document.position_at(document.offset_at(focus.start))
    end = document.position_at(document.offset_at(focus.end))

    ranges = [
        Range(Position(0, 0), start),
        Range(end, document.position_at(len(text))),
    ]
    return [r for r in ranges if not r.is_empty]
