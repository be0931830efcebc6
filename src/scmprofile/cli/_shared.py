# pyright: reportExplicitAny=false
"""Shared CLI utilities.

Standardized exit codes, output formatters and error helpers used by the
command implementations.
"""

from enum import IntEnum, StrEnum
from typing import Any

import orjson
from rich.console import Console

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]


class ExitCode(IntEnum):
    """Standard exit codes for scmprofile CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    COMMAND_FAILED = 2
    NOT_FOUND = 3


class OutputFormat(StrEnum):
    """Output formats accepted by ``--format``."""

    JSON = "json"
    TABLE = "table"


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr."""
    return Console(stderr=True)

