"""Git repository profiling.

Determines the provenance of a directory tree for lockfile pins: the
tracking remote, the HEAD revision, whether tracked files are modified, and
which remote branches already contain the revision.

Example:
    >>> from scmprofile.profiler import profile_path
    >>> cache = {}
    >>> record = profile_path("cookbooks/nginx", cache)
    >>> record.to_lock_data()["scm"]
    'git'
"""

from ._branch import BranchResolver
from ._cache import ProfileCache
from ._gateway import GitCommandGateway
from ._models import (
    BranchOutcome,
    BranchResolution,
    BranchState,
    CommandResult,
    ProfileRecord,
    ScmKind,
)
from ._profiler import GitProfiler, ProfileCacheMapping, profile_path
from ._remote import LOCAL_REMOTE_SENTINEL, RemoteResolver
from ._revision import RevisionResolver
from ._root import DEFAULT_METADATA_DIR, resolve_root

__all__ = [
    "DEFAULT_METADATA_DIR",
    "LOCAL_REMOTE_SENTINEL",
    "BranchOutcome",
    "BranchResolution",
    "BranchResolver",
    "BranchState",
    "CommandResult",
    "GitCommandGateway",
    "GitProfiler",
    "ProfileCache",
    "ProfileCacheMapping",
    "ProfileRecord",
    "RemoteResolver",
    "RevisionResolver",
    "ScmKind",
    "profile_path",
    "resolve_root",
]
