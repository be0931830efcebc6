"""Tracking remote and published-state resolution."""

from functools import cached_property

from scmprofile.exceptions import CommandFailedError, ConfigurationInconsistentError
from scmprofile.profiler._branch import BranchResolver
from scmprofile.profiler._gateway import GitCommandGateway
from scmprofile.profiler._revision import RevisionResolver

# git config --get exits 1 when the key is not set.
_CONFIG_GET_EXIT_CODES: tuple[int, ...] = (0, 1)

# Remote name git uses for a branch that tracks another local branch.
LOCAL_REMOTE_SENTINEL: str = "."


class RemoteResolver:
    """Reads the tracking remote and which remote branches contain HEAD."""

    def __init__(
        self,
        gateway: GitCommandGateway,
        branch: BranchResolver,
        revision: RevisionResolver,
    ) -> None:
        self._gateway: GitCommandGateway = gateway
        self._branch: BranchResolver = branch
        self._revision: RevisionResolver = revision

    @cached_property
    def _remote_name(self) -> str:
        key = f"branch.{self._branch.current_branch()}.remote"
        result = self._gateway.run_or_fail(
            "config", "--get", key, ok_exit_codes=_CONFIG_GET_EXIT_CODES
        )
        return result.output if result.exit_status == 0 else ""

    @cached_property
    def _remote_url(self) -> str | None:
        if not self.has_remote():
            return None
        key = f"remote.{self._remote_name}.url"
        try:
            return self._gateway.run_or_fail("config", "--get", key).output
        except CommandFailedError as e:
            msg = f"Remote {self._remote_name!r} is configured but has no URL"
            raise ConfigurationInconsistentError.wrap(e, msg) from e

    @cached_property
    def _synchronized_remote_branches(self) -> tuple[str, ...]:
        revision = self._revision.revision()
        if revision is None:
            # Unborn branch: nothing can contain a commit that does not exist.
            return ()
        try:
            result = self._gateway.run_or_fail("branch", "-r", "--contains", revision)
        except CommandFailedError:
            if self._branch.is_unborn:
                return ()
            raise
        return tuple(result.lines())

    def remote_name(self) -> str:
        """Return the remote configured for the current branch, or ""."""
        return self._remote_name

    def has_remote(self) -> bool:
        """Whether the current branch tracks a real remote."""
        name = self._remote_name
        return bool(name) and name != LOCAL_REMOTE_SENTINEL

    def remote_url(self) -> str | None:
        """Return the URL of the tracking remote.

        Returns:
            The URL, or None when the branch has no tracking remote.

        Raises:
            ConfigurationInconsistentError: If the remote is configured but
                its URL cannot be read.
        """
        return self._remote_url

    def synchronized_remote_branches(self) -> tuple[str, ...]:
        """Return remote branches whose history contains the revision.

        Lines are trimmed and kept in the order git prints them.
        """
        return self._synchronized_remote_branches

    def published(self) -> bool:
        """Whether the revision is contained in at least one remote branch."""
        return bool(self.synchronized_remote_branches())
