"""View paths domain: cache entry, duration parsing and mount policy."""

from .duration import FOREVER, parse_duration
from .mount_policy import MountStrategy, resolve_mount_strategy
from .value_objects import CacheEntry

__all__ = [
    "CacheEntry",
    "FOREVER",
    "MountStrategy",
    "parse_duration",
    "resolve_mount_strategy",
]
