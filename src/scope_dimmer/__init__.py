"""Indentation and bracket scope detection for editor dimming."""

from scope_dimmer.core import ScopeRegistry, ScopeState, resolve
from scope_dimmer.models import DimmingReason, Position, Range, TextDocument

__all__ = [
    "DimmingReason",
    "Position",
    "Range",
    "ScopeRegistry",
    "ScopeState",
    "TextDocument",
    "resolve",
]
