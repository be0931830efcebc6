"""Command-line interface for scmprofile."""

from ._app import create_app, main
from ._profile import run_profile
from ._shared import ExitCode, OutputFormat, format_json

__all__ = [
    "ExitCode",
    "OutputFormat",
    "create_app",
    "format_json",
    "main",
    "run_profile",
]
