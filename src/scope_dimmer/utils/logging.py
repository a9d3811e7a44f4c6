"""Structured logging configuration.

This module provides logging configuration for scope dimming:
- Configurable log levels and output formats (JSON/console)
- Compact rendering of positions and ranges in log output
- Context injection for correlation (service name, version, bound context)
- File and console output support

Positions render as ``line:character`` and ranges as ``start-end``, with
``$`` standing for the end of a line, so both formats stay readable:

    scope_locked  scope=1:12-3:3
    scope_resolved  scope=1:0-3:$
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import Any, cast

import structlog
from structlog.typing import WrappedLogger

from scope_dimmer.models.range import END_OF_LINE, Position, Range


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _format_position(position: Position) -> str:
    character = "$" if position.character == END_OF_LINE else str(position.character)
    return f"{position.line}:{character}"


def render_log_value(value: Any) -> Any:
    """Render positions and ranges in a value as compact strings.

    Recurses into dicts, lists and tuples; other values pass through.

    Args:
        value: Value to render

    Returns:
        The value with every Position and Range replaced by a string
    """
    if isinstance(value, Range):
        return f"{_format_position(value.start)}-{_format_position(value.end)}"
    if isinstance(value, Position):
        return _format_position(value)
    if isinstance(value, dict):
        return {k: render_log_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [render_log_value(item) for item in value]
    return value


def range_renderer(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor that renders positions and ranges in every field."""
    for key, value in event_dict.items():
        event_dict[key] = render_log_value(value)
    return event_dict


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add contextual information to all log entries.

    Adds standard fields for correlation and debugging:
    - service: Always "scope-dimmer"
    - version: Current package version (if available)

    Args:
        logger: Logger instance (unused)
        method_name: Log method name (unused)
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with added context
    """
    event_dict["service"] = "scope-dimmer"

    try:
        from scope_dimmer._version import __version__

        event_dict["version"] = __version__
    except ImportError:
        pass

    return event_dict


def build_processors(log_format: LogFormat) -> list[Any]:
    """Return the processor chain for an output format.

    Args:
        log_format: Output format selecting the final renderer

    Returns:
        Processors in the order structlog applies them
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        range_renderer,
    ]

    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(), exception_formatter=structlog.dev.plain_traceback
            )
        )
    return processors


def configure_logging(
    level: LogLevel | str = LogLevel.WARNING,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging

    Example:
        # Trace every resolution while developing
        configure_logging(level="DEBUG", log_format="console")
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())
    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    numeric_level = getattr(logging, level.value)

    structlog.configure(
        processors=build_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up later reconfiguration.
        cache_logger_on_first_use=False,
    )

    # stdout is reserved for CLI results.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if file_enabled and file_path:
        try:
            file_path = Path(file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(file_path))
        except OSError as e:
            logging.getLogger("scope_dimmer.logging").warning(
                f"Could not create log file {file_path}: {e}"
            )

    for handler in handlers:
        handler.setLevel(numeric_level)

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> WrappedLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return cast(WrappedLogger, structlog.get_logger(name))


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables for all subsequent log calls.

    Example:
        bind_context(document_id="file:///src/app.py")
        log.info("scope_locked")  # Includes document_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove contextual variables."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()
