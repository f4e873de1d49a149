"""JSON file cache store.

Each key is stored in its own file named after the SHA-1 of the key, so the
cache survives between processes (for example between ``view-paths cache``
and the web application).
"""
import hashlib
import json
import os
import tempfile
from datetime import datetime
from typing import Any, Callable, Optional

from view_paths.domain.base.exceptions import CacheStoreError
from view_paths.domain.base.ports import CacheStorePort
from view_paths.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class FileCacheStore(CacheStorePort):
    """Cache store persisting entries as JSON files in a directory."""

    def __init__(self, directory: str, now: Optional[Callable[[], datetime]] = None):
        self.directory = os.path.expanduser(directory)
        self._now = now or datetime.now

    def path_for(self, key: str) -> str:
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return os.path.join(self.directory, f"{digest}.json")

    def _read(self, key: str) -> Optional[dict]:
        """Read the payload for ``key``; expired or unreadable payloads count as missing."""
        path = self.path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Discarding unreadable cache file {path}: {e}")
            self._remove(path)
            return None
        except OSError as e:
            raise CacheStoreError(f"Failed to read cache file {path}: {e}") from e

        if not isinstance(payload, dict) or "value" not in payload:
            self._remove(path)
            return None

        expires_at = payload.get("expires_at")
        if expires_at is None:
            return payload
        try:
            expired = datetime.fromisoformat(expires_at) <= self._now()
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding cache file {path} with unreadable expiry {expires_at!r}: {e}")
            self._remove(path)
            return None
        if expired:
            self._remove(path)
            return None
        return payload

    def _write(self, key: str, value: Any, expires_at: Optional[datetime]) -> bool:
        path = self.path_for(key)
        payload = {
            "key": key,
            "expires_at": expires_at.isoformat() if expires_at is not None else None,
            "value": value,
        }
        try:
            os.makedirs(self.directory, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(temp_path, path)
            except BaseException:
                self._remove(temp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise CacheStoreError(f"Failed to write cache file {path}: {e}") from e
        return True

    @staticmethod
    def _remove(path: str) -> bool:
        try:
            os.remove(path)
            return True
        except FileNotFoundError:
            return False

    def has(self, key: str) -> bool:
        return self._read(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        payload = self._read(key)
        if payload is None:
            return default
        return payload["value"]

    def put(self, key: str, value: Any, expires_at: datetime) -> bool:
        return self._write(key, value, expires_at)

    def forever(self, key: str, value: Any) -> bool:
        return self._write(key, value, None)

    def forget(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            return self._remove(path)
        except OSError as e:
            raise CacheStoreError(f"Failed to remove cache file {path}: {e}") from e
