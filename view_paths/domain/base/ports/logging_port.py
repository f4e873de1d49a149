"""Logging port for domain and application layers."""
from abc import ABC, abstractmethod


class LoggingPort(ABC):
    """Port for leveled logging."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log debug message."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log info message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log error message."""

    def log(self, level: str, message: str) -> None:
        """Dispatch ``message`` to the method named by ``level``."""
        getattr(self, level.lower())(message)
