"""Thread-safe profile cache.

Callers own the cache that maps repository roots to profile records. A
plain ``dict`` is enough for sequential use. ProfileCache is provided for
callers that profile many paths from several threads and need each
repository to be profiled at most once.

Example:
    >>> cache = ProfileCache()
    >>> with ThreadPoolExecutor() as pool:
    ...     records = list(pool.map(lambda p: profile_path(p, cache), paths))
"""

import threading
from collections.abc import Callable, Iterator, MutableMapping
from pathlib import Path

from scmprofile.profiler._models import ProfileRecord


class ProfileCache(MutableMapping[Path, ProfileRecord]):
    """Mapping of repository root to ProfileRecord with compute-once semantics.

    Each key gets its own lock, so unrelated repositories are profiled in
    parallel while concurrent requests for the same root wait for the first
    computation instead of repeating it.
    """

    __slots__ = ("_key_locks", "_lock", "_records")

    def __init__(self) -> None:
        self._records: dict[Path, ProfileRecord] = {}
        self._key_locks: dict[Path, threading.Lock] = {}
        self._lock: threading.Lock = threading.Lock()

    def _lock_for(self, root: Path) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(root)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[root] = lock
            return lock

    def get_or_compute(
        self, root: Path, factory: Callable[[], ProfileRecord]
    ) -> ProfileRecord:
        """Return the cached record for `root`, computing it at most once.

        Uses double-checked locking: the fast path reads without a lock, the
        slow path re-checks under the per-root lock before calling `factory`.
        If `factory` raises, nothing is stored and the next caller retries.

        Args:
            root: Repository root used as the cache key.
            factory: Builds the record when it is not cached yet.

        Returns:
            The first record computed for `root`.
        """
        record = self._records.get(root)
        if record is not None:
            return record

        with self._lock_for(root):
            record = self._records.get(root)
            if record is None:
                record = factory()
                with self._lock:
                    self._records[root] = record
            return record

    def __getitem__(self, key: Path) -> ProfileRecord:
        return self._records[key]

    def __setitem__(self, key: Path, value: ProfileRecord) -> None:
        with self._lock:
            self._records[key] = value

    def __delitem__(self, key: Path) -> None:
        with self._lock:
            del self._records[key]
            _ = self._key_locks.pop(key, None)

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
