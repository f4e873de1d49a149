"""Web framework integrations."""

from .integration import install_view_paths

__all__ = ["install_view_paths"]
