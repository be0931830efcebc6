"""HEAD revision and working tree cleanliness."""

from functools import cached_property

from scmprofile.exceptions import CommandFailedError, RevisionResolutionError
from scmprofile.profiler._branch import BranchResolver
from scmprofile.profiler._gateway import GitCommandGateway

# diff-files exits 1 when tracked files differ from the index.
_DIFF_FILES_EXIT_CODES: tuple[int, ...] = (0, 1)


class RevisionResolver:
    """Resolves the HEAD commit and whether tracked files are modified."""

    def __init__(self, gateway: GitCommandGateway, branch: BranchResolver) -> None:
        self._gateway: GitCommandGateway = gateway
        self._branch: BranchResolver = branch

    @cached_property
    def _revision(self) -> str | None:
        try:
            return self._gateway.run_or_fail("rev-parse", "HEAD").output
        except CommandFailedError as e:
            if self._branch.is_unborn:
                return None
            msg = "Unable to resolve HEAD"
            raise RevisionResolutionError.wrap(e, msg) from e

    def revision(self) -> str | None:
        """Return the full commit id of HEAD.

        Returns:
            The commit id, or None when the current branch has no commits.

        Raises:
            RevisionResolutionError: If HEAD cannot be resolved for any other
                reason.
        """
        return self._revision

    def working_tree_clean(self) -> bool:
        """Check whether no tracked file differs from the index.

        Untracked files are ignored. The check runs on every call.

        Raises:
            CommandFailedError: If git exits with a status other than 0 or 1.
        """
        result = self._gateway.run_or_fail(
            "diff-files", "--quiet", ok_exit_codes=_DIFF_FILES_EXIT_CODES
        )
        return result.exit_status == 0
