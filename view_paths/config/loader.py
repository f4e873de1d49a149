"""Configuration loading from files and environment."""
import copy
import json
import os
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from view_paths.config.defaults import (
    CONFIG_FILE_ENV_VAR,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILES,
    ENV_OVERRIDES,
)
from view_paths.config.schemas import ViewPathsConfig
from view_paths.config.utils.env_expansion import expand_config_env_vars
from view_paths.domain.base.exceptions import ConfigurationError, InvalidConfigurationError
from view_paths.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

# Top-level key the settings may be nested under in a shared application file
SECTION_KEY = "view_paths"

_TRUE_VALUES = ("true", "1", "yes", "y", "on")


class ConfigurationLoader:
    """
    Loads view paths configuration from multiple sources.

    Precedence, lowest first: built-in defaults, configuration file,
    environment variables.
    """

    @staticmethod
    def load_from_file(file_path: str) -> Dict[str, Any]:
        """
        Load a YAML or JSON configuration file.

        Args:
            file_path: Path to the configuration file

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.endswith(".json"):
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration file {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
        if isinstance(data.get(SECTION_KEY), dict):
            data = data[SECTION_KEY]

        logger.debug(f"Loaded configuration from {file_path}")
        return data

    @staticmethod
    def find_config_file() -> Optional[str]:
        """Find the configuration file from the environment or the working directory."""
        env_path = os.environ.get(CONFIG_FILE_ENV_VAR)
        if env_path:
            return env_path
        for file_name in DEFAULT_CONFIG_FILES:
            if os.path.isfile(file_name):
                return file_name
        return None

    @staticmethod
    def apply_environment_overrides(
        config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """Apply ``VIEW_PATHS_*`` environment variables on top of ``config``."""
        environ = os.environ if environ is None else environ
        result = copy.deepcopy(config)

        for env_var, (key_path, value_type) in ENV_OVERRIDES.items():
            if env_var not in environ:
                continue
            raw = environ[env_var]
            value: Any = raw.strip().lower() in _TRUE_VALUES if value_type is bool else raw

            target = result
            *parents, leaf = key_path.split(".")
            for parent in parents:
                if not isinstance(target.get(parent), dict):
                    target[parent] = {}
                target = target[parent]
            target[leaf] = value
            logger.debug(f"Applied environment override {env_var}")

        return result

    @staticmethod
    def merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``override`` into a copy of ``base``; nested mappings merge key by key."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if key == "logging" and isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = {**result[key], **value}
            else:
                result[key] = copy.deepcopy(value)
        return result

    @classmethod
    def load_raw(
        cls, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """Load the raw configuration dictionary from all sources."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        file_path = config_path or cls.find_config_file()
        if file_path:
            if not os.path.isfile(file_path):
                raise ConfigurationError(f"Configuration file not found: {file_path}")
            config = cls.merge(config, cls.load_from_file(file_path))
        else:
            logger.debug("No configuration file found, using defaults")

        config = cls.apply_environment_overrides(config, environ)
        return expand_config_env_vars(config)

    @classmethod
    def create_config(cls, raw_config: Dict[str, Any]) -> ViewPathsConfig:
        """
        Validate a raw configuration dictionary.

        Raises:
            InvalidConfigurationError: If the configuration fails validation
        """
        try:
            return ViewPathsConfig(**raw_config)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid view paths configuration: {e}", details=e.errors()) from e

    @classmethod
    def load(
        cls, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
    ) -> ViewPathsConfig:
        """Load and validate configuration from all sources."""
        return cls.create_config(cls.load_raw(config_path, environ))
