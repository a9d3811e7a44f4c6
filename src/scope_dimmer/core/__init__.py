"""Core scope detection components.

This module exports the scope detection primitives and state:
- resolve: Scope around a cursor for a dimming reason
- find_enclosing_brackets: Innermost bracket pair around an offset
- indent_block / find_top / find_bot / indent_width: Indentation blocks
- ScopeState: Active/locked scope tracking with expand and shrink
- ScopeRegistry: One ScopeState per open document
"""

from scope_dimmer.core.brackets import find_enclosing_brackets, find_enclosing_offsets
from scope_dimmer.core.dimming import dim_ranges, focus_range
from scope_dimmer.core.indentation import find_bot, find_top, indent_block, indent_width
from scope_dimmer.core.registry import ScopeRegistry
from scope_dimmer.core.resolver import is_root_statement, resolve
from scope_dimmer.core.state import ScopeState, expand_step

__all__ = [
    "ScopeRegistry",
    "ScopeState",
    "dim_ranges",
    "expand_step",
    "find_bot",
    "find_enclosing_brackets",
    "find_enclosing_offsets",
    "find_top",
    "focus_range",
    "indent_block",
    "indent_width",
    "is_root_statement",
    "resolve",
]
