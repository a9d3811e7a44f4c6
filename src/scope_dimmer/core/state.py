"""Scope state machine.

This module implements the ScopeState class that tracks the scope an
editor should keep in focus. It handles:
- Re-deriving the scope on every settled cursor move
- Locking ("fixing") a scope so cursor moves inside it do not change it
- Expanding to the parent scope and shrinking to a child scope

Phases are UNSET (no scope), ACTIVE (scope follows the cursor) and LOCKED
(scope pinned). A lock is released as soon as a re-derived scope is no
longer inside it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from scope_dimmer.core.brackets import find_enclosing_brackets
from scope_dimmer.core.indentation import find_bot, indent_width
from scope_dimmer.core.resolver import clamp_position, resolve
from scope_dimmer.models.document import utf16_length
from scope_dimmer.models.range import END_OF_LINE, Position, Range
from scope_dimmer.models.scope import DimmingReason, ScopePhase

if TYPE_CHECKING:
    from scope_dimmer.config.schema import DimmerConfig
    from scope_dimmer.interfaces.document import DocumentView

log = structlog.get_logger()


def expand_step(
    document: DocumentView,
    scope: Range,
    mode: DimmingReason | str,
    tab_width: int,
) -> Range | None:
    """Find the parent of ``scope`` on the scope containment chain.

    Brackets are tried first (unless in ``indent`` mode): the pair enclosing
    the scope's start. Otherwise, or if that gives nothing new, the walk goes
    up from the scope's first line to the nearest strictly shallower line,
    whose block becomes the candidate.

    Args:
        document: Document snapshot
        scope: Current scope
        mode: Dimming reason
        tab_width: Columns per tab character

    Returns:
        The parent scope, or None if ``scope`` has no parent
    """
    mode = DimmingReason(mode)

    if mode.uses_brackets:
        bracket_range = find_enclosing_brackets(document, document.offset_at(scope.start))
        if bracket_range is not None and bracket_range != scope:
            return bracket_range

    if not mode.uses_indent:
        return None

    start_line = clamp_position(document, scope.start).line
    current = indent_width(document.line_at(start_line).text, tab_width)
    for number in range(start_line - 1, -1, -1):
        line = document.line_at(number)
        if line.is_empty_or_whitespace or indent_width(line.text, tab_width) >= current:
            continue
        # The child's first line is the depth the parent block runs at.
        bot = find_bot(document, number, start_line, tab_width)
        candidate = Range.from_coords(number, 0, bot.line_number, END_OF_LINE)
        if candidate != scope:
            return candidate

    return None


class ScopeState:
    """Tracks the focused scope of one document.

    Responsibilities:
    - Resolve the scope for each cursor move and reconcile it with a lock
    - Toggle the lock on the reported scope
    - Navigate the scope containment chain (expand / shrink)

    Example:
        state = ScopeState(mode="indentAndBrackets", tab_width=2)
        scope = state.on_cursor_moved(document, Position(2, 4))
        state.toggle_lock()      # pin it
        parent = state.expand()  # pin the enclosing scope instead
    """

    def __init__(
        self,
        mode: DimmingReason | str = DimmingReason.INDENT_AND_BRACKETS,
        tab_width: int = 4,
        enabled: bool = True,
    ) -> None:
        """Initialize the ScopeState.

        Args:
            mode: Dimming reason selecting the detectors
            tab_width: Columns per tab character (>= 1)
            enabled: When False, cursor moves report no scope

        Raises:
            ValueError: If the mode is unknown or tab_width is below 1
        """
        self._mode = DimmingReason(mode)
        self._tab_width = self._check_tab_width(tab_width)
        self._enabled = enabled

        self._active: Range | None = None
        self._locked: Range | None = None
        self._document: DocumentView | None = None
        self._cursor: Position | None = None

    @classmethod
    def from_config(cls, config: DimmerConfig, tab_width: int | None = None) -> ScopeState:
        """Create a state from configuration, optionally overriding tab width."""
        return cls(
            mode=config.dimming_reason,
            tab_width=tab_width if tab_width is not None else config.tab_width,
            enabled=config.enabled,
        )

    @staticmethod
    def _check_tab_width(tab_width: int) -> int:
        if tab_width < 1:
            raise ValueError(f"Tab width must be at least 1, got {tab_width}")
        return tab_width

    @property
    def mode(self) -> DimmingReason:
        return self._mode

    @property
    def tab_width(self) -> int:
        return self._tab_width

    @property
    def enabled(self) -> bool:
        """Whether scopes are derived at all."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        if value == self._enabled:
            return
        self._enabled = value
        log.info("scope_dimming_toggled", enabled=value)
        if value:
            self._reconcile()
        else:
            self.reset()

    @property
    def active_scope(self) -> Range | None:
        """Last scope derived from the cursor (or set by expand/shrink)."""
        return self._active

    @property
    def locked_scope(self) -> Range | None:
        """Scope pinned by the user, if any."""
        return self._locked

    @property
    def effective_scope(self) -> Range | None:
        """The scope a host should render: the lock if set, else the active scope."""
        return self._locked if self._locked is not None else self._active

    @property
    def phase(self) -> ScopePhase:
        if self._locked is not None:
            return ScopePhase.LOCKED
        if self._active is not None:
            return ScopePhase.ACTIVE
        return ScopePhase.UNSET

    def on_cursor_moved(
        self,
        document: DocumentView,
        cursor: Position,
        selection: Range | None = None,
    ) -> Range | None:
        """Re-derive the scope for a settled cursor position.

        Args:
            document: Current document snapshot
            cursor: Cursor position
            selection: Current selection; a multi-line one skips recomputation

        Returns:
            The scope to render, or None to render nothing dimmed
        """
        if selection is not None and not selection.is_single_line:
            log.debug(
                "selection_multiline_skipped",
                start_line=selection.start.line,
                end_line=selection.end.line,
            )
            return self.effective_scope

        self._document = document
        self._cursor = cursor
        return self._reconcile()

    def on_document_changed(self, document: DocumentView) -> Range | None:
        """Re-derive the scope after the document's content changed."""
        self._document = document
        return self._reconcile()

    def set_mode(self, mode: DimmingReason | str) -> Range | None:
        """Switch the dimming reason and re-derive the scope."""
        self._mode = DimmingReason(mode)
        log.info("scope_mode_changed", mode=self._mode.value)
        return self._reconcile()

    def set_tab_width(self, tab_width: int) -> Range | None:
        """Update the tab width (e.g. on editor switch) and re-derive the scope."""
        self._tab_width = self._check_tab_width(tab_width)
        return self._reconcile()

    def reset(self) -> None:
        """Forget all scopes, returning to UNSET."""
        self._active = None
        self._locked = None

    def _reconcile(self) -> Range | None:
        if self._document is None or self._cursor is None:
            return self.effective_scope

        if not self._enabled:
            self.reset()
            return None

        scope = resolve(self._document, self._cursor, self._mode, self._tab_width)
        self._active = scope

        if scope is None:
            if self._locked is not None:
                log.debug("lock_released", reason="no_scope")
            self._locked = None
            return None

        if self._locked is not None:
            if self._locked.contains(scope):
                return self._locked
            log.debug("lock_released", reason="escaped", locked=self._locked)
            self._locked = None

        log.debug("scope_resolved", scope=scope, mode=self._mode.value)
        return scope

    def toggle_lock(self) -> Range | None:
        """Lock the reported scope, or release the current lock.

        Releasing re-derives the scope from the last cursor. Locking with no
        scope is a no-op.

        Returns:
            The scope to render after the toggle
        """
        if not self._enabled:
            return None

        if self._locked is not None:
            self._active = self._locked
            self._locked = None
            log.info("scope_unlocked")
            return self._reconcile()

        if self._active is None:
            return None

        self._locked = self._active
        log.info("scope_locked", scope=self._locked)
        return self._locked

    def expand(self) -> Range | None:
        """Lock the parent of the current scope.

        A no-op when there is no scope or the scope has no parent.

        Returns:
            The scope to render after expanding
        """
        scope = self.effective_scope
        if not self._enabled or scope is None or self._document is None:
            return scope

        parent = expand_step(self._document, scope, self._mode, self._tab_width)
        if parent is None:
            log.debug("expand_noop", scope=scope)
            return scope

        self._pin(parent)
        log.info("scope_expanded", scope=parent)
        return parent

    def shrink(self) -> Range | None:
        """Lock the nearest child of the current scope that holds the cursor.

        Tries the scope directly under the cursor, then the chain of its
        parents, for the first one strictly inside the current scope. Falls
        back to the cursor's own line when that is strictly inside it.

        Returns:
            The scope to render after shrinking
        """
        scope = self.effective_scope
        if not self._enabled or scope is None or self._document is None or self._cursor is None:
            return scope

        document = self._document
        cursor = clamp_position(document, self._cursor)
        child = self._find_child(document, scope, cursor)

        if child is None:
            line = document.line_at(cursor.line)
            line_range = Range.from_coords(cursor.line, 0, cursor.line, utf16_length(line.text))
            if not scope.strictly_contains(line_range):
                log.debug("shrink_noop", scope=scope)
                return scope
            child = line_range

        self._pin(child)
        log.info("scope_shrunk", scope=child)
        return child

    def _find_child(self, document: DocumentView, scope: Range, cursor: Position) -> Range | None:
        candidate = resolve(document, cursor, self._mode, self._tab_width)
        if candidate is not None and scope.strictly_contains(candidate):
            return candidate

        seen: set[Range] = set()
        while candidate is not None and candidate not in seen:
            seen.add(candidate)
            candidate = expand_step(document, candidate, self._mode, self._tab_width)
            if candidate is not None and scope.strictly_contains(candidate):
                return candidate

        return None

    def _pin(self, scope: Range) -> None:
        self._active = scope
        self._locked = scope
