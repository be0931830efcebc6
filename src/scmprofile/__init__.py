"""Source-control provenance profiling for lockfile pins."""

from scmprofile.exceptions import (
    CommandFailedError,
    ConfigurationInconsistentError,
    GitExecutableNotFoundError,
    NoCurrentBranchError,
    ProfilePathError,
    RepositoryNotFoundError,
    RevisionResolutionError,
    ScmProfileError,
)
from scmprofile.profiler import (
    GitProfiler,
    ProfileCache,
    ProfileRecord,
    ScmKind,
    profile_path,
    resolve_root,
)

__version__ = "0.1.0"

__all__ = [
    "CommandFailedError",
    "ConfigurationInconsistentError",
    "GitExecutableNotFoundError",
    "GitProfiler",
    "NoCurrentBranchError",
    "ProfileCache",
    "ProfilePathError",
    "ProfileRecord",
    "RepositoryNotFoundError",
    "RevisionResolutionError",
    "ScmKind",
    "ScmProfileError",
    "__version__",
    "profile_path",
    "resolve_root",
]
