"""In-memory cache store."""
import copy
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from view_paths.domain.base.ports import CacheStorePort


class InMemoryCacheStore(CacheStorePort):
    """Process-local cache store with per-entry expiry.

    Values are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._entries: Dict[str, Tuple[Any, Optional[datetime]]] = {}
        self._lock = threading.RLock()
        self._now = now or datetime.now

    def _live_entry(self, key: str) -> Optional[Tuple[Any, Optional[datetime]]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        _, expires_at = entry
        if expires_at is not None and expires_at <= self._now():
            del self._entries[key]
            return None
        return entry

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                return default
            return copy.deepcopy(entry[0])

    def put(self, key: str, value: Any, expires_at: datetime) -> bool:
        with self._lock:
            self._entries[key] = (copy.deepcopy(value), expires_at)
        return True

    def forever(self, key: str, value: Any) -> bool:
        with self._lock:
            self._entries[key] = (copy.deepcopy(value), None)
        return True

    def forget(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for key in list(self._entries) if self._live_entry(key) is not None)
