"""
Logging Package
Structured logging for the view layer

Provides a drop-in replacement for logging.getLogger that keeps
logger names tidy and a LoggerConfig to attach JSON or text output.
"""
from sanicview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Listed in view.LOGGING_HANDLERS config (e.g., 'sanicview')
    - Module-based names (containing '.') like 'sanicview.view.view'

    Example:
        from sanicview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Template cache hit", extra={'path': path})
    """
    if name is not None and '.' not in name:
        from sanicview.support import Config
        allowed_handlers = Config.get('view.LOGGING_HANDLERS', {}) or {}

        allowed_names = [
            handler_config.get('name')
            for handler_config in allowed_handlers.values()
            if handler_config.get('name') is not None
        ]

        if name not in allowed_names:
            # Force arbitrary names to use root logger
            name = None

    return logging.getLogger(name)
