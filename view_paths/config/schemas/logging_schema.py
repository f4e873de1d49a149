"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = ("debug", "info", "warning", "error")


class LoggingConfig(BaseModel):
    """Settings for logging view path operations."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(False, description="Log view path operations")
    level: str = Field(
        "info",
        description="Level for messages logged without an explicit one (debug, info, warning or error), not a filter",
    )
    channel: Optional[str] = Field(None, description="Named channel, None uses the default logger")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = str(v).lower()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {list(VALID_LOG_LEVELS)}")
        return level

    @field_validator("channel", mode="before")
    @classmethod
    def empty_channel_is_default(cls, v: Optional[str]) -> Optional[str]:
        return v or None
