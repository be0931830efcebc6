from pathlib import Path

import pytest

from scmprofile.exceptions import (
    CommandFailedError,
    ConfigError,
    ConfigLoadError,
    ConfigurationInconsistentError,
    GitExecutableNotFoundError,
    NoCurrentBranchError,
    ProfilePathError,
    RepositoryNotFoundError,
    RevisionResolutionError,
    ScmProfileError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [NoCurrentBranchError, RevisionResolutionError, ConfigurationInconsistentError],
    )
    def test_resolution_errors_are_command_failures(
        self, error_type: type[CommandFailedError]
    ) -> None:
        assert issubclass(error_type, CommandFailedError)
        assert issubclass(error_type, ScmProfileError)

    def test_config_errors(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigError, ScmProfileError)

    def test_repository_not_found_keeps_path(self) -> None:
        error = RepositoryNotFoundError("nope", path=Path("/src/loose"))

        assert error.path == Path("/src/loose")
        assert isinstance(error, ScmProfileError)

    def test_path_error_keeps_path(self) -> None:
        error = ProfilePathError("gone", path=Path("/src/nginx/gone"))

        assert error.path == Path("/src/nginx/gone")
        assert not isinstance(error, CommandFailedError)

    def test_missing_executable_keeps_name(self) -> None:
        error = GitExecutableNotFoundError("missing", executable="git")

        assert error.executable == "git"


class TestCommandFailedError:
    def test_default_message_includes_command_and_stderr(self) -> None:
        error = CommandFailedError(
            128,
            "fatal: not a git repository\n",
            command=("git", "rev-parse", "HEAD"),
        )

        assert str(error) == (
            "git rev-parse HEAD exited with status 128: fatal: not a git repository"
        )

    def test_message_without_command_or_stderr(self) -> None:
        assert str(CommandFailedError(1, "")) == "git exited with status 1"

    def test_wrap_preserves_details(self) -> None:
        original = CommandFailedError(
            1,
            "",
            stdout="partial\n",
            command=("git", "config", "--get", "remote.ghost.url"),
        )

        wrapped = ConfigurationInconsistentError.wrap(original, "Remote has no URL")

        assert isinstance(wrapped, ConfigurationInconsistentError)
        assert wrapped.exit_status == original.exit_status
        assert wrapped.stderr == original.stderr
        assert wrapped.stdout == original.stdout
        assert wrapped.command == original.command
        assert str(wrapped).startswith("Remote has no URL: ")
