"""Per-file locks for the JSON repositories.

Every read and every read-modify-write of a data file runs under the lock
for that file, so concurrent saves within one process never lose an update.
The locks are process-local: two processes writing the same file are not
serialized.
"""

from __future__ import annotations

import threading
from pathlib import Path

_registry_lock = threading.Lock()
_locks: dict[Path, threading.RLock] = {}


def lock_for(file_path: Path) -> threading.RLock:
    key = file_path.resolve()
    with _registry_lock:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]
