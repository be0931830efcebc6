"""The ``profile`` command.

Profiles one or more paths and prints the lockfile data for each. All paths
share one cache, so paths inside the same repository are profiled once.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from structlog.typing import FilteringBoundLogger

from scmprofile.config import Config
from scmprofile.exceptions import (
    CommandFailedError,
    ConfigLoadError,
    GitExecutableNotFoundError,
    ProfilePathError,
)
from scmprofile.profiler import ProfileRecord, profile_path
from scmprofile.utils import create_cli_logger

from ._shared import ExitCode, OutputFormat, format_json, get_error_console


def _load_config(config_path: Path | None, error_console: Console) -> Config | None:
    try:
        return Config.load(config_path)
    except (ConfigLoadError, FileNotFoundError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return None


def _render_table(results: dict[str, ProfileRecord | None], console: Console) -> None:
    table = Table(title="Source control profile")
    table.add_column("Path")
    table.add_column("Revision")
    table.add_column("Remote")
    table.add_column("Clean")
    table.add_column("Published")

    for path, record in results.items():
        if record is None:
            table.add_row(path, "[dim]not under version control[/dim]", "", "", "")
            continue
        table.add_row(
            path,
            record.revision or "[dim](no commits)[/dim]",
            record.remote_url or "[dim](none)[/dim]",
            "yes" if record.working_tree_clean else "[yellow]no[/yellow]",
            ", ".join(record.synchronized_remote_branches)
            if record.published
            else "[yellow]no[/yellow]",
        )

    console.print(table)


def run_profile(
    paths: list[Path],
    *,
    output_format: OutputFormat = OutputFormat.JSON,
    config_path: Path | None = None,
    console: Console | None = None,
    error_console: Console | None = None,
    logger: FilteringBoundLogger | None = None,
) -> ExitCode:
    """Profile `paths` and print the results.

    Args:
        paths: Paths to profile. Defaults to the current directory when empty.
        output_format: JSON (lockfile data keyed by path) or a table.
        config_path: Explicit config file.
        console: Console for results.
        error_console: Console for errors.
        logger: Logger override. Built from the loaded config when None.

    Returns:
        SUCCESS; CONFIG_ERROR; COMMAND_FAILED when git failed for a path;
        NOT_FOUND when a path inside a repository does not exist.
    """
    console = console if console is not None else Console()
    error_console = error_console if error_console is not None else get_error_console()

    config = _load_config(config_path, error_console)
    if config is None:
        return ExitCode.CONFIG_ERROR

    if logger is None:
        logger = create_cli_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # pyright: ignore[reportArgumentType]
            log_file=config.logging.file,
            command="profile",
        )

    cache: dict[Path, ProfileRecord] = {}
    results: dict[str, ProfileRecord | None] = {}

    for path in paths or [Path.cwd()]:
        try:
            results[str(path)] = profile_path(
                path, cache, settings=config.git, logger=logger
            )
        except (CommandFailedError, GitExecutableNotFoundError) as e:
            logger.error("profile_failed", path=str(path), error=str(e))
            error_console.print(f"[red]Error:[/red] {escape(f'{path}: {e}')}")
            return ExitCode.COMMAND_FAILED
        except ProfilePathError as e:
            logger.error("profile_failed", path=str(path), error=str(e))
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            return ExitCode.NOT_FOUND

    if output_format is OutputFormat.TABLE:
        _render_table(results, console)
    else:
        data = {
            path: record.to_lock_data() if record is not None else None
            for path, record in results.items()
        }
        console.print(format_json(data), soft_wrap=True, markup=False, highlight=False)

    return ExitCode.SUCCESS
