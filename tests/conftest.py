"""Shared test fixtures for scmprofile tests."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest
import structlog
from structlog.testing import CapturingLogger
from structlog.typing import FilteringBoundLogger

from scmprofile.profiler import ProfileRecord


@dataclass(frozen=True, slots=True)
class CapturedLog:
    """A logger wired to an in-memory capture."""

    logger: FilteringBoundLogger
    capture: CapturingLogger

    def events(self, method: str | None = None) -> list[str]:
        """Return the event names logged so far, optionally by level."""
        return [
            str(call.kwargs["event"])
            for call in self.capture.calls
            if method is None or call.method_name == method
        ]


@pytest.fixture
def captured_log() -> CapturedLog:
    """Create a debug-level logger whose calls are recorded in memory."""
    capture = CapturingLogger()
    logger = structlog.wrap_logger(
        capture,
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
    )
    return CapturedLog(logger=logger, capture=capture)  # pyright: ignore[reportArgumentType]


# ---------------------------------------------------------------------------
# Real git repositories
# ---------------------------------------------------------------------------


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in the given directory and return its stdout."""
    result = subprocess.run(  # noqa: S603 - Safe: controlled git args
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        msg = f"git {' '.join(args)} failed: {result.stderr}"
        raise RuntimeError(msg)
    return result.stdout


def init_git_repo(path: Path, *, branch: str = "main") -> Path:
    """Initialize an empty git repository with HEAD on `branch`."""
    path.mkdir(parents=True, exist_ok=True)
    run_git(path, "init", "--quiet")
    run_git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    run_git(path, "config", "user.name", "Test User")
    run_git(path, "config", "user.email", "test@example.com")
    run_git(path, "config", "commit.gpgsign", "false")
    return path


def commit_file(
    repo: Path, name: str = "README.md", content: str = "# cookbook\n"
) -> str:
    """Write a file, commit it, and return the new HEAD commit id."""
    target = repo / name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content)
    run_git(repo, "add", name)
    run_git(repo, "commit", "--quiet", "-m", f"Add {name}")
    return run_git(repo, "rev-parse", "HEAD").strip()


@pytest.fixture(autouse=True)
def _isolated_git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's git and scmprofile settings out of tests."""
    empty_config = tmp_path / ".gitconfig-empty"
    empty_config.touch()
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(empty_config))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SCMPROFILE_DEBUG", raising=False)
    monkeypatch.delenv("SCMPROFILE_LOG_LEVEL", raising=False)


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """A freshly initialized repository with no commits."""
    return init_git_repo(tmp_path / "empty")


@pytest.fixture
def committed_repo(tmp_path: Path) -> Path:
    """A repository with a single commit and no remote."""
    repo = init_git_repo(tmp_path / "committed")
    _ = commit_file(repo)
    return repo


@pytest.fixture
def published_repo(tmp_path: Path) -> tuple[Path, Path]:
    """A repository whose only commit is pushed to a bare `origin`.

    Returns:
        Tuple of (working repository, bare remote).
    """
    remote = tmp_path / "remote.git"
    remote.mkdir()
    run_git(remote, "init", "--quiet", "--bare")

    repo = init_git_repo(tmp_path / "published")
    _ = commit_file(repo)
    run_git(repo, "remote", "add", "origin", str(remote))
    run_git(repo, "push", "--quiet", "-u", "origin", "main")
    return repo, remote


def make_record(
    *,
    revision: str | None = "a" * 40,
    remote_url: str | None = None,
    working_tree_clean: bool = True,
    branches: tuple[str, ...] = (),
) -> ProfileRecord:
    """Build a ProfileRecord with sensible defaults."""
    return ProfileRecord(
        remote_url=remote_url,
        revision=revision,
        working_tree_clean=working_tree_clean,
        synchronized_remote_branches=branches,
    )
