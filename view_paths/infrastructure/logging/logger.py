"""Logging setup for view paths.

Library code logs through stdlib loggers obtained from ``get_logger``. The
host application owns handler configuration; ``setup_logging`` is only called
by the CLI.
"""
import logging
import sys
from typing import Optional

import structlog

ROOT_LOGGER_NAME = "view_paths"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to each record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Get a stdlib logger."""
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", stream: Optional[object] = None) -> structlog.stdlib.BoundLogger:
    """
    Configure logging for command line use.

    Args:
        level: Log level name
        stream: Output stream, defaults to stderr

    Returns:
        Configured structlog logger bound to the package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(ROOT_LOGGER_NAME)
    logger.debug("Logging configured", log_level=level)
    return logger
