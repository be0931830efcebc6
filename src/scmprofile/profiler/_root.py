"""Repository root discovery."""

from pathlib import Path

DEFAULT_METADATA_DIR: str = ".git"


def resolve_root(
    path: Path | str, *, metadata_dir: str = DEFAULT_METADATA_DIR
) -> Path | None:
    """Find the repository root enclosing a path.

    Searches from `path` itself upward through parent directories until a
    directory containing a `metadata_dir` directory is found. The closest
    ancestor wins. No git command is run.

    Args:
        path: File or directory to start from. Relative paths and symlinks
            are resolved first, so different spellings of one location
            yield the same root.
        metadata_dir: Name of the repository metadata directory.

    Returns:
        The directory containing `metadata_dir`, or None when the path is
        not under version control.

    Examples:
        >>> resolve_root(Path("/path/to/repo/cookbooks/nginx"))
        PosixPath('/path/to/repo')
    """
    current = Path(path).resolve()

    while True:
        if (current / metadata_dir).is_dir():
            return current
        parent = current.parent
        if parent == current:  # Reached filesystem root
            return None
        current = parent
