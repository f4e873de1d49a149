"""Configuration package for view paths."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import LoggingConfig, ViewPathsConfig, validate_config

__all__ = [
    "ConfigurationLoader",
    "ConfigurationManager",
    "LoggingConfig",
    "ViewPathsConfig",
    "validate_config",
]
