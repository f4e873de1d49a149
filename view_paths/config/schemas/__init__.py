"""Configuration schemas package."""

from .logging_schema import VALID_LOG_LEVELS, LoggingConfig
from .view_paths_schema import (
    DEFAULT_CACHE_PATH,
    VALID_CACHE_STORES,
    ViewPathsConfig,
    validate_config,
)

__all__ = [
    # Main configuration
    "ViewPathsConfig",
    "validate_config",
    "DEFAULT_CACHE_PATH",
    "VALID_CACHE_STORES",
    # Logging configuration
    "LoggingConfig",
    "VALID_LOG_LEVELS",
]
