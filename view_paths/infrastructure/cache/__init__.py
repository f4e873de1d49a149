"""Cache store adapters."""

from view_paths.config.schemas import ViewPathsConfig
from view_paths.domain.base.ports import CacheStorePort

from .file_cache_store import FileCacheStore
from .memory_cache_store import InMemoryCacheStore


def create_cache_store(config: ViewPathsConfig) -> CacheStorePort:
    """Create the cache store selected by ``config.cache_store``."""
    if config.cache_store == "memory":
        return InMemoryCacheStore()
    return FileCacheStore(config.cache_path)


__all__ = ["FileCacheStore", "InMemoryCacheStore", "create_cache_store"]
