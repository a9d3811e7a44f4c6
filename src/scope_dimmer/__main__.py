"""Entry point for inspecting scopes from the command line.

This module provides the ``scope-dimmer`` command. It handles:
- Configuration loading (optional YAML file, CLI flags take precedence)
- Logging setup
- Resolving the scope at a cursor and replaying lock/expand/shrink commands
- Printing the resulting scope as JSON
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from scope_dimmer._version import __version__
from scope_dimmer.models.document import TextDocument
from scope_dimmer.models.range import Range
from scope_dimmer.models.scope import DimmingReason

log = structlog.get_logger()

COMMANDS = ("fix", "expand", "shrink")


def setup_logging(
    debug: bool = False,
    log_format: str = "console",
    file_path: Path | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging
    """
    from scope_dimmer.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(
        level=level,
        log_format=LogFormat(log_format.lower()),
        file_path=file_path,
        file_enabled=file_enabled,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="scope-dimmer",
        description="Show the indentation or bracket scope around a cursor position",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument("file", type=Path, help="Text file to inspect")

    parser.add_argument(
        "-l",
        "--line",
        type=int,
        required=True,
        help="Zero-based cursor line",
    )

    parser.add_argument(
        "--character",
        type=int,
        default=0,
        help="Zero-based cursor column in UTF-16 code units (default: 0)",
    )

    parser.add_argument(
        "-m",
        "--mode",
        choices=[reason.value for reason in DimmingReason],
        default=None,
        help="Dimming reason (default: from config, else indentAndBrackets)",
    )

    parser.add_argument(
        "-t",
        "--tab-width",
        type=int,
        default=None,
        help="Columns per tab character (default: from config, else 4)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )

    parser.add_argument(
        "--command",
        dest="commands",
        action="append",
        choices=COMMANDS,
        default=[],
        help="Command to apply after placing the cursor (repeatable, applied in order)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: from configuration, else console)",
    )

    return parser.parse_args(argv)


def describe_scope(document: TextDocument, scope: Range | None) -> dict[str, Any] | None:
    """Serialize a scope with clamped coordinates and its text."""
    if scope is None:
        return None
    clamped = document.validate_range(scope)
    return {**clamped.to_dict(), "text": document.get_text(clamped)}


def run(args: argparse.Namespace) -> int:
    """Resolve and print the scope described by ``args``.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from scope_dimmer.config.loader import load_config
    from scope_dimmer.core.state import ScopeState
    from scope_dimmer.models.range import Position
    from scope_dimmer.utils.logging import bind_context, clear_context, configure_logging

    try:
        config = load_config(args.config)

        # Reconfigure logging from file and DIMMER_ environment settings
        configure_logging(
            level="DEBUG" if args.debug else config.logging.level,
            log_format=args.format or config.logging.format,
            file_path=config.logging.file.path if config.logging.file.enabled else None,
            file_enabled=config.logging.file.enabled,
        )

        document = TextDocument.from_path(args.file)
    except FileNotFoundError as e:
        log.error("file_not_found", error=str(e))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log.error("file_unreadable", path=str(args.file), error=str(e))
        return 1
    except (ValueError, ValidationError) as e:
        log.error("configuration_invalid", error=str(e))
        return 1

    bind_context(document_id=document.uri)
    try:
        state = ScopeState(
            mode=args.mode or config.dimming_reason,
            tab_width=args.tab_width if args.tab_width is not None else config.tab_width,
        )
        scope = state.on_cursor_moved(document, Position(args.line, args.character))
        for command in args.commands:
            if command == "fix":
                scope = state.toggle_lock()
            elif command == "expand":
                scope = state.expand()
            else:
                scope = state.shrink()
    except ValueError as e:
        log.error("invalid_arguments", error=str(e))
        return 1
    finally:
        clear_context()

    print(json.dumps(describe_scope(document, scope), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(
        debug=args.debug,
        log_format=args.format or "console",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
