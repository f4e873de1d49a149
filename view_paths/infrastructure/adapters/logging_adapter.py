"""Logging adapter implementing LoggingPort."""
import logging
from typing import Optional

from view_paths.config.schemas.logging_schema import LoggingConfig
from view_paths.domain.base.ports import LoggingPort
from view_paths.infrastructure.logging.logger import ROOT_LOGGER_NAME, get_logger


class ViewPathsLogger(LoggingPort):
    """
    Logger for view path operations.

    Messages are dropped entirely when logging is disabled. The configured
    level is the default for messages logged without one, not a filter. A
    configured channel routes messages to the ``view_paths.<channel>`` stdlib
    logger.
    """

    def __init__(self, config: Optional[LoggingConfig] = None, logger: Optional[logging.Logger] = None):
        self.config = config or LoggingConfig()
        if logger is None:
            name = ROOT_LOGGER_NAME
            if self.config.channel:
                name = f"{ROOT_LOGGER_NAME}.{self.config.channel}"
            logger = get_logger(name)
        self._logger = logger

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def _emit(self, level: int, message: str) -> None:
        if not self.config.enabled:
            return
        self._logger.log(level, message)

    def debug(self, message: str) -> None:
        self._emit(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(logging.ERROR, message)
