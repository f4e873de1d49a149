"""Application services."""

from .view_paths_service import ViewPathsService

__all__ = ["ViewPathsService"]
