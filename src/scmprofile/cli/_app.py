# pyright: reportUnusedFunction=false
"""The command-line interface for scmprofile."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from scmprofile import __version__

from ._profile import run_profile
from ._shared import ExitCode, OutputFormat

_HELP = "Record the source-control provenance of directory trees."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Build the scmprofile CLI application.

    Args:
        console: Console for command output.
        error_console: Console for errors.
        exit_on_error: Whether cyclopts exits on parse errors.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)

    app = App(
        name="scmprofile",
        help=_HELP,
        help_on_error=True,
        version=__version__,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.command(name="profile")
    def _profile(
        *paths: Path,
        format: Annotated[  # noqa: A002
            OutputFormat,
            Parameter(name=["--format", "-f"], help="Output format"),
        ] = OutputFormat.JSON,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Profile the repositories enclosing PATHS (default: current directory).

        Args:
            paths: Directories to profile.
            format: Output format.
            config: Explicit path to config file.
        """
        code = run_profile(
            list(paths),
            output_format=format,
            config_path=config,
            console=console,
            error_console=error_console,
        )
        if code is not ExitCode.SUCCESS:
            raise SystemExit(code)

    return app


def main() -> None:
    """Default entrypoint for the `scmprofile` CLI."""
    app = create_app()
    app()
