"""Fixtures for profiler unit tests with a scripted git."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from scmprofile.profiler import GitCommandGateway
from tests.conftest import CapturedLog

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@dataclass(slots=True)
class ScriptedGit:
    """Stands in for ``subprocess.run`` and answers git invocations by argv."""

    responses: dict[tuple[str, ...], tuple[int, str, str]] = field(
        default_factory=dict
    )
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def on(
        self, *args: str, exit_status: int = 0, stdout: str = "", stderr: str = ""
    ) -> None:
        """Register the outcome of ``git <args>``."""
        self.responses[args] = (exit_status, stdout, stderr)

    def count(self, *args: str) -> int:
        """Number of times ``git <args>`` was run."""
        return self.calls.count(args)

    def __call__(
        self, argv: Sequence[str], **_kwargs: object
    ) -> subprocess.CompletedProcess[bytes]:
        args = tuple(argv[1:])
        self.calls.append(args)
        if args not in self.responses:
            msg = f"Unexpected git invocation: {args}"
            raise AssertionError(msg)
        exit_status, stdout, stderr = self.responses[args]
        return subprocess.CompletedProcess(
            list(argv), exit_status, stdout.encode(), stderr.encode()
        )


@pytest.fixture
def scripted_git(mocker: MockerFixture) -> ScriptedGit:
    """Patch the gateway's subprocess.run with a ScriptedGit."""
    scripted = ScriptedGit()
    mocker.patch("scmprofile.profiler._gateway.subprocess.run", side_effect=scripted)
    return scripted


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """A directory that looks like a repository root (has a .git directory)."""
    (tmp_path / "repo" / ".git").mkdir(parents=True)
    return tmp_path / "repo"


@pytest.fixture
def gateway(repo_dir: Path, captured_log: CapturedLog) -> GitCommandGateway:
    """A gateway running in `repo_dir` and logging to memory."""
    return GitCommandGateway(repo_dir, logger=captured_log.logger)


UNBORN_STDERR = (
    "fatal: ambiguous argument 'HEAD': unknown revision or path not in the "
    "working tree.\n"
)


def script_resolved_branch(scripted: ScriptedGit, branch: str = "main") -> None:
    """Script a repository on `branch` with commits."""
    scripted.on("rev-parse", "--abbrev-ref", "HEAD", stdout=f"{branch}\n")


def script_unborn_branch(scripted: ScriptedGit, branch: str = "main") -> None:
    """Script a freshly initialized repository with no commits."""
    scripted.on(
        "rev-parse", "--abbrev-ref", "HEAD", exit_status=128, stderr=UNBORN_STDERR
    )
    scripted.on("symbolic-ref", "-q", "HEAD", stdout=f"refs/heads/{branch}\n")
    scripted.on(
        "show-ref",
        "--verify",
        f"refs/heads/{branch}",
        exit_status=128,
        stderr=f"fatal: 'refs/heads/{branch}' - not a valid ref\n",
    )
    scripted.on("rev-parse", "HEAD", exit_status=128, stderr=UNBORN_STDERR)
