"""Shared fixtures for view paths tests."""
import logging
from datetime import datetime
from typing import List, Tuple
from unittest.mock import Mock

import pytest

from view_paths.config.schemas import ViewPathsConfig
from view_paths.domain.base.ports import LoggingPort, ViewRegistrarPort
from view_paths.infrastructure.cache import InMemoryCacheStore

FIXED_NOW = datetime(2024, 1, 31, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by setup_logging."""
    package_logger = logging.getLogger("view_paths")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


class RecordingLogger(LoggingPort):
    """Logger that keeps every message for assertions."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> List[str]:
        return [message for record_level, message in self.records if record_level == level]


@pytest.fixture
def clock():
    """Fixed clock."""
    return lambda: FIXED_NOW


@pytest.fixture
def view_dirs(tmp_path):
    """Two real template directories."""
    first = tmp_path / "views" / "first"
    second = tmp_path / "views" / "second"
    first.mkdir(parents=True)
    second.mkdir(parents=True)
    return str(first), str(second)


@pytest.fixture
def make_config():
    """Factory for configurations with logging enabled."""

    def _make(**overrides) -> ViewPathsConfig:
        values = {
            "cache_store": "memory",
            "logging": {"enabled": True, "level": "debug"},
        }
        values.update(overrides)
        return ViewPathsConfig(**values)

    return _make


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def memory_cache(clock):
    return InMemoryCacheStore(now=clock)


@pytest.fixture
def registrar():
    """Mock view registrar with component support."""
    mock = Mock(spec=ViewRegistrarPort)
    mock.mount_components.return_value = True
    return mock
