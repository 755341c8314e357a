"""
Logging Package
Package-scoped loggers with optional structured JSON output
"""
from bladeview.logging.logger_config import (
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

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'bladeview'

# Library code stays silent unless the host configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Every logger handed out lives under the 'bladeview' hierarchy, so a
    single LoggerConfig.setup_logger('bladeview') call configures the
    whole package.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance

    Example:
        from bladeview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Compiled view", extra={'path': path})
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
