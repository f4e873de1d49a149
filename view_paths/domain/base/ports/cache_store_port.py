"""Cache store port."""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class CacheStorePort(ABC):
    """Port for the key/value cache the validated view paths are stored in.

    Implementations only need key-level atomicity; no coordination between
    writers is expected.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a non-expired entry exists under ``key``."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get the entry stored under ``key`` or ``default``."""

    @abstractmethod
    def put(self, key: str, value: Any, expires_at: datetime) -> bool:
        """Store ``value`` under ``key`` until ``expires_at``."""

    @abstractmethod
    def forever(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key`` without expiry."""

    @abstractmethod
    def forget(self, key: str) -> bool:
        """Remove the entry stored under ``key``."""
