"""Logging utilities for scmprofile.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs either to a file or to stderr. Each
logger is self-contained and does not modify global structlog configuration,
so embedding applications keep full control of their own logging setup.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import Literal, cast

import structlog
from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEFAULT_LOG_LEVEL: str = "warning"


def _get_log_level(default: str = DEFAULT_LOG_LEVEL) -> int:
    """Get the log level from environment variables.

    Checks SCMPROFILE_DEBUG first (sets DEBUG if present), then
    SCMPROFILE_LOG_LEVEL. Falls back to *default*.

    Returns:
        The logging level as an integer.
    """
    if getenv("SCMPROFILE_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(
        getenv("SCMPROFILE_LOG_LEVEL", default).upper(), logging.WARNING
    )


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, SCMPROFILE_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv("SCMPROFILE_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def _create_logger(
    log_file_path: str = "",
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
) -> FilteringBoundLogger:
    """Create a standalone structlog logger.

    Args:
        log_file_path: Path to the log file (opened in append mode). When
            empty, log lines are written to stderr.
        log_level: Override log level (uses env vars if not specified).
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = log_level if log_level is not None else _get_log_level()

    if log_file_path:
        log_path = Path(log_file_path).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )


def create_profiler_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "text",
    log_file: str = "",
) -> FilteringBoundLogger:
    """Create a logger for repository profiling.

    The log level is determined by (in order of precedence):
    1. SCMPROFILE_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` parameter (if provided)
    3. SCMPROFILE_LOG_LEVEL environment variable
    4. Default: WARNING

    Args:
        level: Optional log level string (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file. Empty writes to stderr.

    Returns:
        A FilteringBoundLogger instance for profiler events.
    """
    effective_level: int | None = None
    if level is not None:
        effective_level = _log_level_from_string(level, respect_env=True)

    return _create_logger(
        log_file,
        log_level=effective_level,
        log_format=log_format,
    ).bind(component="profiler")


def create_cli_logger(
    *,
    level: str = DEFAULT_LOG_LEVEL,
    log_format: LogFormatType = "text",
    log_file: str = "",
    command: str = "",
) -> FilteringBoundLogger:
    """Create a logger for CLI commands.

    The logger automatically binds the command name to all log entries.
    SCMPROFILE_DEBUG, if set, enables DEBUG level regardless of config.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file. Empty writes to stderr.
        command: Name of the CLI command for context.

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.
    """
    logger = _create_logger(
        log_file,
        log_level=_log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )

    if command:
        return logger.bind(command=command)
    return logger
