"""View registrar port."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

RenderListener = Callable[[str, Optional[str]], None]


class ViewRegistrarPort(ABC):
    """Port for registering template lookup locations with the host renderer."""

    @abstractmethod
    def prepend_location(self, path: str) -> None:
        """Search ``path`` before every previously registered location."""

    @abstractmethod
    def prepend_namespace(self, namespace: str, path: str) -> None:
        """Search ``path`` first for templates referenced as ``namespace::name``."""

    @abstractmethod
    def mount_components(self, path: str) -> bool:
        """Mount component templates from ``path``.

        Returns False when the host has no component support, in which case
        the caller falls back to a plain namespace registration.
        """

    @abstractmethod
    def register_anonymous_component_path(self, path: str, prefix: str) -> None:
        """Register ``path`` as a search path for anonymous components under ``prefix``."""

    @abstractmethod
    def set_option(self, key: str, value: Any) -> None:
        """Set a renderer option shared by every render."""

    @abstractmethod
    def set_request_option(self, key: str, value: Any) -> None:
        """Set a renderer option visible only to renders in the current request context."""

    @abstractmethod
    def add_render_listener(self, listener: RenderListener) -> None:
        """Call ``listener(name, filename)`` for every rendered template."""
