"""Shared utilities for scmprofile."""

from ._logging import (
    DEFAULT_LOG_LEVEL,
    LogFormatType,
    create_cli_logger,
    create_profiler_logger,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LogFormatType",
    "create_cli_logger",
    "create_profiler_logger",
]
