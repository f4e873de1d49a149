"""Domain base package."""

from .exceptions import (
    CacheStoreError,
    ConfigurationError,
    InvalidConfigurationError,
    ViewPathsError,
)
from .results import StoreResult

__all__ = [
    "ViewPathsError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "CacheStoreError",
    "StoreResult",
]
