"""Git repository profiler.

This module ties the resolvers together into GitProfiler and provides
profile_path(), the entry point used by lockfile generation. Profiles are
memoized in a caller-owned cache keyed by repository root, so every path
inside one repository shares a single record.
"""

from collections.abc import MutableMapping
from functools import cached_property
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from scmprofile.config import GitSettings
from scmprofile.exceptions import RepositoryNotFoundError
from scmprofile.profiler._branch import BranchResolver
from scmprofile.profiler._cache import ProfileCache
from scmprofile.profiler._gateway import GitCommandGateway
from scmprofile.profiler._models import BranchState, ProfileRecord, ScmKind
from scmprofile.profiler._remote import RemoteResolver
from scmprofile.profiler._revision import RevisionResolver
from scmprofile.profiler._root import resolve_root
from scmprofile.utils import create_profiler_logger

type ProfileCacheMapping = MutableMapping[Path, ProfileRecord]


class GitProfiler:
    """Profiles the git repository enclosing a directory.

    Create one instance per profiled path. Git is only invoked lazily, the
    first time a value is requested, and each query is memoized for the
    lifetime of the instance (except the working tree check, which is
    re-evaluated on every call).

    Attributes:
        path: The profiled path.
        working_directory: Where git runs: `path` itself, or its parent
            directory when `path` is a file.
        scm: Backend identifier.
    """

    scm: ScmKind = ScmKind.GIT

    def __init__(
        self,
        path: Path | str,
        cache: ProfileCacheMapping | None = None,
        *,
        settings: GitSettings | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize the profiler.

        Args:
            path: Directory (or file) to profile.
            cache: Shared mapping of repository root to ProfileRecord. When
                None, a private cache is used.
            settings: Git invocation settings. Defaults to GitSettings().
            logger: Logger for profiler events. Defaults to a stderr logger.
        """
        self.path: Path = Path(path)
        self.working_directory: Path = (
            self.path.parent if self.path.is_file() else self.path
        )
        self._cache: ProfileCacheMapping = cache if cache is not None else {}
        self._settings: GitSettings = (
            settings if settings is not None else GitSettings()
        )
        self._logger: FilteringBoundLogger = (
            logger if logger is not None else create_profiler_logger()
        ).bind(path=str(self.path))

        self._gateway: GitCommandGateway = GitCommandGateway(
            self.working_directory,
            executable=self._settings.executable,
            env=self._settings.env,
            logger=self._logger,
        )
        self._branch: BranchResolver = BranchResolver(self._gateway, self._logger)
        self._revision: RevisionResolver = RevisionResolver(
            self._gateway, self._branch
        )
        self._remote: RemoteResolver = RemoteResolver(
            self._gateway, self._branch, self._revision
        )

    @cached_property
    def repository_root(self) -> Path:
        """Directory containing the repository metadata.

        Raises:
            RepositoryNotFoundError: If the path is not inside a repository.
        """
        root = resolve_root(self.path, metadata_dir=self._settings.metadata_dir)
        if root is None:
            msg = f"Not inside a git repository: {self.path}"
            raise RepositoryNotFoundError(msg, path=self.path)
        return root

    @property
    def branch_state(self) -> BranchState:
        """Current branch classification."""
        return self._branch.state

    def current_branch(self) -> str:
        """Return the current branch, or the unborn ref substitute."""
        return self._branch.current_branch()

    def revision(self) -> str | None:
        """Return the HEAD commit id, or None for an unborn branch."""
        return self._revision.revision()

    def working_tree_clean(self) -> bool:
        """Whether no tracked file differs from the index."""
        return self._revision.working_tree_clean()

    def remote_name(self) -> str:
        """Return the remote configured for the current branch, or ""."""
        return self._remote.remote_name()

    def has_remote(self) -> bool:
        """Whether the current branch tracks a real remote."""
        return self._remote.has_remote()

    def remote_url(self) -> str | None:
        """Return the tracking remote URL, or None."""
        return self._remote.remote_url()

    def synchronized_remote_branches(self) -> tuple[str, ...]:
        """Return remote branches containing the revision."""
        return self._remote.synchronized_remote_branches()

    def published(self) -> bool:
        """Whether any remote branch contains the revision."""
        return self._remote.published()

    def _build_record(self) -> ProfileRecord:
        record = ProfileRecord(
            scm=self.scm,
            remote_url=self.remote_url(),
            revision=self.revision(),
            working_tree_clean=self.working_tree_clean(),
            synchronized_remote_branches=self.synchronized_remote_branches(),
        )
        self._logger.info(
            "repository_profiled",
            root=str(self.repository_root),
            revision=record.revision,
            working_tree_clean=record.working_tree_clean,
            published=record.published,
        )
        return record

    def profile_data(self) -> ProfileRecord:
        """Return the profile of the enclosing repository.

        The record is looked up in the shared cache by repository root and
        only computed when absent; the first computed record wins.

        Raises:
            RepositoryNotFoundError: If the path is not inside a repository.
            CommandFailedError: If a git failure is not explained by an
                unborn branch.
            ProfilePathError: If the path does not exist.
        """
        root = self.repository_root
        cache = self._cache

        cached = cache.get(root)
        if cached is not None:
            self._logger.debug("profile_cache_hit", root=str(root))
            return cached

        if isinstance(cache, ProfileCache):
            return cache.get_or_compute(root, self._build_record)
        return cache.setdefault(root, self._build_record())


def profile_path(
    path: Path | str,
    cache: ProfileCacheMapping,
    *,
    settings: GitSettings | None = None,
    logger: FilteringBoundLogger | None = None,
) -> ProfileRecord | None:
    """Profile the repository enclosing `path`.

    Args:
        path: Directory or file to profile. Git runs in the parent
            directory of a file.
        cache: Caller-owned mapping of repository root to ProfileRecord.
        settings: Git invocation settings.
        logger: Logger for profiler events.

    Returns:
        The ProfileRecord, or None when `path` is not under version control.
        No git command is run for uncontrolled paths.

    Raises:
        CommandFailedError: If a git failure is not explained by an unborn
            branch.
        ProfilePathError: If `path` is inside a repository but does not
            exist.
    """
    effective_settings = settings if settings is not None else GitSettings()
    if resolve_root(path, metadata_dir=effective_settings.metadata_dir) is None:
        if logger is not None:
            logger.debug("repository_not_found", path=str(path))
        return None

    profiler = GitProfiler(path, cache, settings=effective_settings, logger=logger)
    return profiler.profile_data()
