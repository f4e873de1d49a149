"""Main view paths configuration schema."""
import os
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from view_paths.domain.view_paths.duration import FOREVER

from .logging_schema import LoggingConfig

VALID_CACHE_STORES = ("memory", "file")

DEFAULT_CACHE_PATH = os.path.join("~", ".cache", "view_paths")


class ViewPathsConfig(BaseModel):
    """View paths configuration.

    Loaded once per process and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(True, description="Master switch for the whole package")
    paths: List[str] = Field(
        default_factory=list,
        description="Directories prepended to the template search path",
    )
    namespaced_paths: Dict[str, str] = Field(
        default_factory=dict,
        description="Namespace to directory mapping, templates referenced as namespace::name",
    )
    cache_enabled: bool = Field(True, description="Cache the validated paths")
    cache_duration: Union[int, str, None] = Field(
        FOREVER,
        description='"forever", seconds as an integer, or "<N><unit>" with unit in s m h d w M y',
    )
    cache_key: str = Field("view_paths", description="Key the validated paths are cached under")
    cache_store: str = Field("file", description="Cache store: memory or file")
    cache_path: str = Field(DEFAULT_CACHE_PATH, description="Directory used by the file cache store")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    log_views_info: bool = Field(False, description="Log name and path of every rendered template")

    @field_validator("paths", mode="before")
    @classmethod
    def validate_paths(cls, v: Any) -> List[str]:
        """Drop empty entries, a bare string is treated as a single path."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [str(path) for path in v if path]

    @field_validator("namespaced_paths", mode="before")
    @classmethod
    def validate_namespaced_paths(cls, v: Any) -> Dict[str, str]:
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("namespaced_paths must be a mapping of namespace to path")
        return {str(namespace): str(path) for namespace, path in v.items() if path}

    @field_validator("cache_duration", mode="before")
    @classmethod
    def validate_cache_duration(cls, v: Any) -> Union[int, str, None]:
        """
        Validate cache duration.

        Integers must not be negative. Digit-only strings from environment
        overrides become integers. Other strings are kept as-is; unknown
        formats are reported when the cache is warmed.
        """
        if isinstance(v, bool):
            raise ValueError("Cache duration must be 'forever', seconds, or a duration string")
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v.strip())
        if isinstance(v, int) and v < 0:
            raise ValueError("Cache duration must be non-negative")
        return v

    @field_validator("cache_key")
    @classmethod
    def validate_cache_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Cache key must not be empty")
        return v

    @field_validator("cache_store")
    @classmethod
    def validate_cache_store(cls, v: str) -> str:
        store = v.lower()
        if store not in VALID_CACHE_STORES:
            raise ValueError(f"Cache store must be one of {list(VALID_CACHE_STORES)}")
        return store


def validate_config(config: Dict[str, Any]) -> ViewPathsConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return ViewPathsConfig(**config)
