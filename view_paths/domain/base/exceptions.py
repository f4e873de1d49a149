"""Exception hierarchy for view paths."""
from typing import Any, Optional


class ViewPathsError(Exception):
    """Base exception for view paths errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(ViewPathsError):
    """Raised when configuration cannot be loaded."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration fails schema validation."""


class CacheStoreError(ViewPathsError):
    """Raised by cache store adapters when the backing storage fails."""
