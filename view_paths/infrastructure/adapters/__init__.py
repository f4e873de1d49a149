"""Adapters implementing domain ports."""

from .jinja_view_registrar import JinjaViewRegistrar
from .locale_adapter import ContextLocaleAdapter
from .logging_adapter import ViewPathsLogger

__all__ = ["ContextLocaleAdapter", "JinjaViewRegistrar", "ViewPathsLogger"]
