"""Data models and transfer objects."""

from .document import TextDocument, TextLine
from .range import END_OF_LINE, Position, Range
from .scope import DimmingReason, ScopePhase

__all__ = [
    # Range models
    "END_OF_LINE",
    "Position",
    "Range",
    # Document models
    "TextDocument",
    "TextLine",
    # Scope models
    "DimmingReason",
    "ScopePhase",
]
