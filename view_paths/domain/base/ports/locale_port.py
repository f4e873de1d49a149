"""Locale port."""
from abc import ABC, abstractmethod
from typing import Optional


class LocalePort(ABC):
    """Port for reading the session locale and setting the application locale."""

    default_locale: str = "en"

    @abstractmethod
    def get_session_locale(self, default: Optional[str] = None) -> Optional[str]:
        """Get the locale stored in the current session."""

    @abstractmethod
    def get_current_locale(self) -> str:
        """Get the locale the application currently renders with."""

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        """Switch the application locale."""
