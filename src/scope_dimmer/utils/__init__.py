"""Utility functions and helpers.

This module provides utilities for scope-dimmer:
- logging: Structured logging configuration and context binding
"""

from scope_dimmer.utils.logging import (
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
