"""Git command execution.

This module provides the GitCommandGateway, the only place in the profiler
that spawns processes. Every invocation is synchronous, runs with the
profiled path as its working directory, and is never retried: git's
read-only subcommands fail deterministically, so a failure is a fact about
the repository rather than a transient fault.
"""

import os
import subprocess
from collections.abc import Collection, Mapping
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from scmprofile.exceptions import (
    CommandFailedError,
    GitExecutableNotFoundError,
    ProfilePathError,
)
from scmprofile.profiler._models import CommandResult
from scmprofile.utils import create_profiler_logger

DEFAULT_OK_EXIT_CODES: tuple[int, ...] = (0,)


class GitCommandGateway:
    """Runs git subcommands in a fixed working directory.

    Acceptable exit codes are chosen per call site; there is no global
    override.

    Attributes:
        cwd: Working directory for every invocation.
        executable: Name or path of the git binary.
    """

    __slots__ = ("_env", "_logger", "cwd", "executable")

    def __init__(
        self,
        cwd: Path,
        *,
        executable: str = "git",
        env: Mapping[str, str] | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self.cwd: Path = cwd
        self.executable: str = executable
        self._env: dict[str, str] = dict(env or {})
        self._logger: FilteringBoundLogger = (
            logger if logger is not None else create_profiler_logger()
        )

    def run(
        self, *args: str, ok_exit_codes: Collection[int] = DEFAULT_OK_EXIT_CODES
    ) -> CommandResult:
        """Run ``git <args>`` and capture its output.

        Never raises for a non-zero exit status; `ok_exit_codes` only
        affects how the invocation is logged.

        Args:
            *args: Subcommand and its arguments.
            ok_exit_codes: Exit statuses considered successful.

        Returns:
            The captured CommandResult.

        Raises:
            ProfilePathError: If the working directory is not a directory.
            GitExecutableNotFoundError: If the git executable cannot be found.
        """
        if not self.cwd.is_dir():
            msg = f"Cannot run git in {self.cwd}: not an existing directory"
            raise ProfilePathError(msg, path=self.cwd)

        argv = (self.executable, *args)
        env = {**os.environ, **self._env} if self._env else None

        try:
            completed = subprocess.run(  # noqa: S603 - argv list, no shell
                argv,
                cwd=str(self.cwd),
                env=env,
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as e:
            if e.filename == str(self.cwd):
                msg = f"Cannot run git in {self.cwd}: directory disappeared"
                raise ProfilePathError(msg, path=self.cwd) from e
            msg = f"Git executable not found: {self.executable}"
            raise GitExecutableNotFoundError(msg, executable=self.executable) from e

        result = CommandResult(
            args=argv,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
            exit_status=completed.returncode,
        )

        self._logger.debug(
            "git_command",
            args=list(args),
            cwd=str(self.cwd),
            exit_status=result.exit_status,
            ok=result.exit_status in ok_exit_codes,
        )
        return result

    def run_or_fail(
        self, *args: str, ok_exit_codes: Collection[int] = DEFAULT_OK_EXIT_CODES
    ) -> CommandResult:
        """Run ``git <args>`` and fail unless the exit status is acceptable.

        Args:
            *args: Subcommand and its arguments.
            ok_exit_codes: Exit statuses considered successful.

        Returns:
            The captured CommandResult.

        Raises:
            CommandFailedError: If the exit status is not in `ok_exit_codes`.
            ProfilePathError: If the working directory is not a directory.
            GitExecutableNotFoundError: If the git executable cannot be found.
        """
        result = self.run(*args, ok_exit_codes=ok_exit_codes)
        if result.exit_status not in ok_exit_codes:
            raise CommandFailedError(
                result.exit_status,
                result.stderr,
                stdout=result.stdout,
                command=result.args,
            )
        return result
