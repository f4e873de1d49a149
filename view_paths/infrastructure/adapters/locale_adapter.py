"""Locale adapter implementing LocalePort."""
from contextvars import ContextVar
from typing import Callable, Mapping, Optional

from view_paths.domain.base.ports import LocalePort

current_locale_var: ContextVar[Optional[str]] = ContextVar("view_paths_locale", default=None)

SessionGetter = Callable[[], Optional[Mapping[str, str]]]


class ContextLocaleAdapter(LocalePort):
    """
    Locale port backed by a context variable.

    The session is read through ``session_getter``, which returns the
    current request's session mapping (or None outside a request).
    """

    def __init__(
        self,
        default_locale: str = "en",
        session_getter: Optional[SessionGetter] = None,
        session_key: str = "locale",
    ):
        self.default_locale = default_locale
        self._session_getter = session_getter
        self._session_key = session_key

    def get_session_locale(self, default: Optional[str] = None) -> Optional[str]:
        session = self._session_getter() if self._session_getter else None
        if not session:
            return default
        return session.get(self._session_key, default)

    def get_current_locale(self) -> str:
        return current_locale_var.get() or self.default_locale

    def set_locale(self, locale: str) -> None:
        current_locale_var.set(locale)
