"""Domain ports for infrastructure concerns."""

from .cache_store_port import CacheStorePort
from .locale_port import LocalePort
from .logging_port import LoggingPort
from .view_registrar_port import RenderListener, ViewRegistrarPort

__all__ = [
    "CacheStorePort",
    "LocalePort",
    "LoggingPort",
    "RenderListener",
    "ViewRegistrarPort",
]
