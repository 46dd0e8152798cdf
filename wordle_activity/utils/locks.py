"""
Keyed Locks

One lock per key so that read-modify-write sequences for the same user run
one at a time while different users proceed in parallel. A key's lock only
exists while someone holds or waits for it.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class KeyedLocks:
    """Registry of re-entrant locks, reference counted per key."""

    def __init__(self):
        # key -> [lock, holders_and_waiters]
        self._locks: Dict[str, List] = {}
        self._registry_lock = threading.Lock()

    def _acquire_entry(self, key: str) -> threading.RLock:
        with self._registry_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = [threading.RLock(), 0]
                self._locks[key] = entry
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: str) -> None:
        with self._registry_lock:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        lock = self._acquire_entry(key)
        try:
            with lock:
                yield
        finally:
            self._release_entry(key)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)
