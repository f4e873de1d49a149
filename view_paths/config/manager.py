"""Configuration manager for view paths."""
from __future__ import annotations

import threading
from typing import Any, Dict, Mapping, Optional

from view_paths.config.loader import ConfigurationLoader
from view_paths.config.schemas import ViewPathsConfig
from view_paths.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for the view paths configuration.

    Configuration is loaded lazily on first access and cached until
    ``reload()`` is called.
    """

    def __init__(
        self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
    ) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file
            environ: Environment used for overrides, defaults to ``os.environ``
        """
        self._config_path = config_path
        self._environ = environ
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._config: Optional[ViewPathsConfig] = None

    @property
    def raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        if self._raw_config is None:
            with self._lock:
                if self._raw_config is None:
                    self._raw_config = ConfigurationLoader.load_raw(self._config_path, self._environ)
        return self._raw_config

    @property
    def config(self) -> ViewPathsConfig:
        """Get typed configuration."""
        if self._config is None:
            with self._lock:
                if self._config is None:
                    self._config = ConfigurationLoader.create_config(self.raw_config)
                    logger.debug("Configuration loaded successfully")
        return self._config

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._raw_config = None
            self._config = None
