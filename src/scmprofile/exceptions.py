"""scmprofile exceptions."""

from collections.abc import Sequence  # noqa: TC003
from pathlib import Path  # noqa: TC003
from typing import Self


class ScmProfileError(Exception):
    """Base exception for scmprofile errors."""


class RepositoryNotFoundError(ScmProfileError):
    """Raised when a profiled path is not inside any git repository."""

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and the profiled path."""
        super().__init__(message)
        self.path: Path = path


class ProfilePathError(ScmProfileError):
    """Raised when git cannot run in a profiled path because it is not a directory."""

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and the offending path."""
        super().__init__(message)
        self.path: Path = path


class GitExecutableNotFoundError(ScmProfileError):
    """Raised when the configured git executable cannot be launched."""

    def __init__(self, message: str, *, executable: str) -> None:
        """Initialize with error message and the executable that was tried."""
        super().__init__(message)
        self.executable: str = executable


# =============================================================================
# Command Exceptions
# =============================================================================


class CommandFailedError(ScmProfileError):
    """Raised when a git invocation exits outside its acceptable status set.

    Attributes:
        exit_status: Exit status returned by git.
        stderr: Captured standard error.
        stdout: Captured standard output.
        command: The argv that was executed.
    """

    def __init__(
        self,
        exit_status: int,
        stderr: str,
        *,
        stdout: str = "",
        command: Sequence[str] = (),
        message: str | None = None,
    ) -> None:
        """Initialize with exit status, captured output and the command."""
        if message is None:
            rendered = " ".join(command) if command else "git"
            message = f"{rendered} exited with status {exit_status}"
            if stderr.strip():
                message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.exit_status: int = exit_status
        self.stderr: str = stderr
        self.stdout: str = stdout
        self.command: tuple[str, ...] = tuple(command)

    @classmethod
    def wrap(cls, error: "CommandFailedError", message: str) -> Self:  # noqa: UP037
        """Build an instance of this class carrying another failure's details.

        The caller is expected to raise the result ``from error`` so the
        original failure stays on the exception chain.

        Args:
            error: The original command failure.
            message: Human-readable message for the new exception.

        Returns:
            A new exception with the same exit status, output and command.
        """
        return cls(
            error.exit_status,
            error.stderr,
            stdout=error.stdout,
            command=error.command,
            message=f"{message}: {error}",
        )


class NoCurrentBranchError(CommandFailedError):
    """The current branch could not be read and no unborn branch explains it."""


class RevisionResolutionError(CommandFailedError):
    """HEAD could not be resolved and no unborn branch explains it."""


class ConfigurationInconsistentError(CommandFailedError):
    """A remote name is configured for the branch but its URL cannot be read."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(ScmProfileError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded, parsed or validated."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column
