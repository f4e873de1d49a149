"""Value objects for cached view paths."""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CacheEntry:
    """Validated view paths as persisted under the cache key.

    Stored in the cache as a plain mapping so any store that can hold JSON
    can hold it.
    """

    paths: List[str] = field(default_factory=list)
    namespaced_paths: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "CacheEntry":
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> "CacheEntry":
        """Build an entry from whatever the store returned."""
        if not isinstance(data, dict):
            return cls()
        paths = data.get("paths") or []
        namespaced_paths = data.get("namespaced_paths") or {}
        return cls(paths=list(paths), namespaced_paths=dict(namespaced_paths))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "paths": list(self.paths),
            "namespaced_paths": dict(self.namespaced_paths),
        }

    def is_empty(self) -> bool:
        return not self.paths and not self.namespaced_paths
