"""Data models describing scope detection modes and state."""

from enum import Enum, StrEnum


class DimmingReason(StrEnum):
    """Which detectors produce the current scope."""

    INDENT = "indent"
    BRACKETS = "brackets"
    INDENT_AND_BRACKETS = "indentAndBrackets"

    @property
    def uses_brackets(self) -> bool:
        """Whether bracket pairs are consulted."""
        return self is not DimmingReason.INDENT

    @property
    def uses_indent(self) -> bool:
        """Whether indentation blocks are consulted."""
        return self is not DimmingReason.BRACKETS


class ScopePhase(Enum):
    """Phase of a ScopeState."""

    UNSET = "unset"  # no scope, nothing dimmed
    ACTIVE = "active"  # scope follows the cursor
    LOCKED = "locked"  # scope pinned by the user
