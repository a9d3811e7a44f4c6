"""Per-document scope state registry.

Each open document gets its own ScopeState, looked up by document id
(a file path or editor URI). The registry also remembers which document
is active so hosts can route commands to it.
"""

from __future__ import annotations

import structlog

from scope_dimmer.config.schema import DimmerConfig
from scope_dimmer.core.state import ScopeState

log = structlog.get_logger()


class ScopeRegistry:
    """Maps document ids to their ScopeState.

    Example:
        registry = ScopeRegistry(config)
        state = registry.activate("file:///src/app.py", tab_width=4)
        state.on_cursor_moved(document, cursor)
        registry.close("file:///src/app.py")
    """

    def __init__(self, config: DimmerConfig | None = None) -> None:
        """Initialize the registry.

        Args:
            config: Configuration used for new states (defaults if None)
        """
        self._config = config if config is not None else DimmerConfig()
        self._states: dict[str, ScopeState] = {}
        self._active_id: str | None = None

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._states

    @property
    def config(self) -> DimmerConfig:
        return self._config

    @property
    def active(self) -> ScopeState | None:
        """State of the active document, if any."""
        if self._active_id is None:
            return None
        return self._states.get(self._active_id)

    @property
    def active_id(self) -> str | None:
        return self._active_id

    def state_for(self, document_id: str, tab_width: int | None = None) -> ScopeState:
        """Get the state for a document, creating it on first use.

        Args:
            document_id: Document identity
            tab_width: Tab width for a newly created state (config default if None)

        Returns:
            The document's ScopeState
        """
        state = self._states.get(document_id)
        if state is None:
            state = ScopeState.from_config(self._config, tab_width=tab_width)
            self._states[document_id] = state
            log.debug("scope_state_created", document_id=document_id, tab_width=state.tab_width)
        return state

    def activate(self, document_id: str, tab_width: int | None = None) -> ScopeState:
        """Mark a document as active, refreshing its tab width.

        Args:
            document_id: Document identity
            tab_width: The document's current tab width, if the host knows it

        Returns:
            The document's ScopeState
        """
        state = self.state_for(document_id, tab_width=tab_width)
        if tab_width is not None and tab_width != state.tab_width:
            state.set_tab_width(tab_width)
        self._active_id = document_id
        return state

    def close(self, document_id: str) -> None:
        """Forget a closed document."""
        if self._states.pop(document_id, None) is not None:
            log.debug("scope_state_removed", document_id=document_id)
        if self._active_id == document_id:
            self._active_id = None

    def apply_config(self, config: DimmerConfig) -> None:
        """Apply a changed configuration to every open document.

        Tab widths are left alone, since they belong to each document.
        """
        self._config = config
        for state in self._states.values():
            state.enabled = config.enabled
            state.set_mode(config.dimming_reason)
        log.info(
            "scope_config_applied",
            documents=len(self._states),
            mode=config.dimming_reason.value,
            enabled=config.enabled,
        )
