"""Current branch resolution.

A freshly initialized repository has HEAD pointing at a branch ref that has
never been committed to. Git reports that state as an ordinary command
failure, so every failure while reading the branch or the revision has to be
classified before it is either converted into an empty result or raised:

- RESOLVED: git printed the branch name.
- UNBORN: HEAD is a symbolic ref that does not resolve to any commit.
- UNEXPLAINED: anything else. The original failure is kept and re-raised.
"""

from functools import cached_property

from structlog.typing import FilteringBoundLogger

from scmprofile.exceptions import CommandFailedError, NoCurrentBranchError
from scmprofile.profiler._gateway import GitCommandGateway
from scmprofile.profiler._models import (
    BranchOutcome,
    BranchResolution,
    BranchState,
)


class BranchResolver:
    """Reads the current branch and detects unborn branches.

    All git queries are memoized for the lifetime of the instance, so the
    revision and remote resolvers can ask for the classification repeatedly
    without re-running git.
    """

    def __init__(
        self, gateway: GitCommandGateway, logger: FilteringBoundLogger
    ) -> None:
        self._gateway: GitCommandGateway = gateway
        self._logger: FilteringBoundLogger = logger

    @cached_property
    def resolution(self) -> BranchResolution:
        """Classify the current branch as resolved, unborn or unexplained."""
        try:
            result = self._gateway.run_or_fail("rev-parse", "--abbrev-ref", "HEAD")
        except CommandFailedError as e:
            if self.unborn_ref_name is not None:
                return BranchResolution(
                    outcome=BranchOutcome.UNBORN, name=self.unborn_ref_name
                )
            return BranchResolution(outcome=BranchOutcome.UNEXPLAINED, error=e)
        return BranchResolution(outcome=BranchOutcome.RESOLVED, name=result.output)

    @cached_property
    def unborn_ref_name(self) -> str | None:
        """The symbolic ref HEAD points at, if that ref has no commits.

        Returns None when HEAD is not a symbolic ref (detached) or when the
        ref resolves to a commit; in both cases an earlier failure has some
        other cause.
        """
        try:
            ref = self._gateway.run_or_fail("symbolic-ref", "-q", "HEAD").output
        except CommandFailedError:
            return None

        verify = self._gateway.run("show-ref", "--verify", ref)
        if verify.exit_status == 0:
            return None

        self._logger.info("unborn_branch_detected", ref=ref)
        return ref

    @property
    def is_unborn(self) -> bool:
        """Whether HEAD points at a branch with no commits yet."""
        return self.unborn_ref_name is not None

    def current_branch(self) -> str:
        """Return the current branch name.

        For an unborn branch the full symbolic ref (e.g. ``refs/heads/main``)
        is returned as a best-effort substitute.

        Raises:
            NoCurrentBranchError: If git failed and no unborn branch explains it.
        """
        resolution = self.resolution
        if resolution.outcome is BranchOutcome.UNEXPLAINED:
            error = resolution.error
            assert error is not None  # noqa: S101
            msg = "Unable to determine the current branch"
            raise NoCurrentBranchError.wrap(error, msg) from error
        assert resolution.name is not None  # noqa: S101
        return resolution.name

    @property
    def state(self) -> BranchState:
        """Snapshot of the branch classification.

        Only the branch lookup itself is forced; the unborn probe is reported
        if it has already run but is not triggered here.
        """
        resolution = self.resolution
        unborn_ref: str | None = self.__dict__.get("unborn_ref_name")
        return BranchState(
            current_branch_name=(
                None
                if resolution.outcome is BranchOutcome.UNEXPLAINED
                else resolution.name
            ),
            is_unborn=unborn_ref is not None,
            unborn_ref_name=unborn_ref,
        )
