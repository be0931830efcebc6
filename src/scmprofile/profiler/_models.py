"""Profiler data models.

This module provides the immutable records produced and exchanged by the
repository profiler: the captured result of a git invocation, the branch
classification, and the final profile record written into lockfiles.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from scmprofile.exceptions import CommandFailedError


class ScmKind(StrEnum):
    """Source-control backend identifiers."""

    GIT = "git"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a single git invocation.

    Attributes:
        args: The argv that was executed, including the git executable.
        stdout: Standard output decoded as UTF-8.
        stderr: Standard error decoded as UTF-8.
        exit_status: Process exit status.
    """

    args: tuple[str, ...]
    stdout: str
    stderr: str
    exit_status: int

    @property
    def output(self) -> str:
        """Standard output with surrounding whitespace removed."""
        return self.stdout.strip()

    def lines(self) -> Iterator[str]:
        """Yield trimmed, non-empty output lines in the order git printed them."""
        for line in self.stdout.splitlines():
            stripped = line.strip()
            if stripped:
                yield stripped


class BranchOutcome(StrEnum):
    """Classification of an attempt to read the current branch."""

    RESOLVED = "resolved"
    UNBORN = "unborn"
    UNEXPLAINED = "unexplained"


@dataclass(frozen=True, slots=True)
class BranchResolution:
    """Result of classifying the current branch.

    Attributes:
        outcome: Which of the three outcomes applies.
        name: Branch name for RESOLVED, the symbolic ref for UNBORN.
        error: The original failure for UNEXPLAINED.
    """

    outcome: BranchOutcome
    name: str | None = None
    error: CommandFailedError | None = None


@dataclass(frozen=True, slots=True)
class BranchState:
    """Snapshot of what the branch resolver has learned.

    Attributes:
        current_branch_name: Current branch, or the unborn ref substitute.
            None when the branch could not be determined.
        is_unborn: Whether HEAD points at a ref with no commits.
        unborn_ref_name: The symbolic ref HEAD points at when unborn.
    """

    current_branch_name: str | None
    is_unborn: bool
    unborn_ref_name: str | None = None


@dataclass(frozen=True, slots=True)
class ProfileRecord:
    """Source-control provenance of a directory tree.

    Attributes:
        scm: Backend identifier.
        remote_url: URL of the tracking remote, or None without one.
        revision: Full commit id of HEAD, or None when no commits exist.
        working_tree_clean: Whether no tracked file differs from the index.
        synchronized_remote_branches: Remote branches containing `revision`,
            in the order git reported them.
    """

    remote_url: str | None
    revision: str | None
    working_tree_clean: bool
    synchronized_remote_branches: tuple[str, ...] = field(default_factory=tuple)
    scm: ScmKind = ScmKind.GIT

    @property
    def published(self) -> bool:
        """Whether any remote branch already contains the revision."""
        return bool(self.synchronized_remote_branches)

    def to_lock_data(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Render the record as the hash stored in a lockfile."""
        return {
            "scm": str(self.scm),
            "remote": self.remote_url,
            "revision": self.revision,
            "working_tree_clean": self.working_tree_clean,
            "published": self.published,
            "synchronized_remote_branches": list(self.synchronized_remote_branches),
        }
