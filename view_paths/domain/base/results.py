"""Result types returned from filesystem and cache store boundary calls."""
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a single call against the cache store or filesystem."""

    success: bool
    value: Any = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, value: Any = None) -> "StoreResult":
        return cls(success=True, value=value)

    @classmethod
    def failed(cls, error: Exception) -> "StoreResult":
        return cls(success=False, error_message=str(error))

    @classmethod
    def capture(cls, func: Callable[..., Any], *args: Any, **kwargs: Any) -> "StoreResult":
        """Run ``func`` and wrap its return value or exception."""
        try:
            return cls.ok(func(*args, **kwargs))
        except Exception as e:
            return cls.failed(e)
