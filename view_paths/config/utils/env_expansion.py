"""Environment variable expansion for configuration values."""
import os
from typing import Any, Dict

# Keys whose values are filesystem paths and also get ``~`` expanded
PATH_KEYS = ("paths", "namespaced_paths", "cache_path")


def expand_env_vars(value: Any) -> Any:
    """
    Expand ``$VAR`` and ``${VAR}`` references in strings, recursively.

    Unknown variables are left untouched. Non-string scalars are returned
    unchanged.
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _expand_user(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expanduser(value)
    if isinstance(value, dict):
        return {key: _expand_user(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_user(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables everywhere and ``~`` in path settings."""
    expanded = expand_env_vars(config)
    for key in PATH_KEYS:
        if key in expanded:
            expanded[key] = _expand_user(expanded[key])
    return expanded
