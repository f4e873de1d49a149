"""Default configuration values.

Mirrors the published configuration file so a missing file behaves the same
as a freshly installed one.
"""
from typing import Any, Dict

from view_paths.config.schemas.view_paths_schema import DEFAULT_CACHE_PATH

DEFAULT_CONFIG: Dict[str, Any] = {
    "enabled": True,
    "paths": [],
    "namespaced_paths": {},
    "cache_enabled": True,
    "cache_duration": "forever",
    "cache_key": "view_paths",
    "cache_store": "file",
    "cache_path": DEFAULT_CACHE_PATH,
    "logging": {
        "enabled": False,
        "level": "info",
        "channel": None,
    },
    "log_views_info": False,
}

# Searched in order when no configuration file is given
DEFAULT_CONFIG_FILES = ("view_paths.yml", "view_paths.yaml", "view_paths.json")

CONFIG_FILE_ENV_VAR = "VIEW_PATHS_CONFIG"

# Environment variable -> (config path, value type)
ENV_OVERRIDES = {
    "VIEW_PATHS_ENABLED": ("enabled", bool),
    "VIEW_PATHS_CACHE_ENABLED": ("cache_enabled", bool),
    "VIEW_PATHS_CACHE_DURATION": ("cache_duration", str),
    "VIEW_PATHS_CACHE_KEY": ("cache_key", str),
    "VIEW_PATHS_CACHE_STORE": ("cache_store", str),
    "VIEW_PATHS_CACHE_PATH": ("cache_path", str),
    "VIEW_PATHS_LOGGING_ENABLED": ("logging.enabled", bool),
    "VIEW_PATHS_LOG_LEVEL": ("logging.level", str),
    "VIEW_PATHS_LOG_CHANNEL": ("logging.channel", str),
    "VIEW_PATHS_LOG_VIEWS_INFO": ("log_views_info", bool),
}
