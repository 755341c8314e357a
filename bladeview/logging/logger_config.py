"""
Logging Configuration
Console and rotating-file logging for the view pipeline and the CLI
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import List, Optional, Union
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
    ])

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Additional fields to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed via logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: str = 'bladeview',
        format_type: str = 'text',
        level: Optional[int] = None,
        log_file: Optional[Union[str, Path]] = None,
        max_bytes: int = None,
        backup_count: int = None,
        environment: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup a logger with a console handler and an optional rotating file

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            level: Explicit level; derived from the environment when omitted
            log_file: Optional path of a rotating log file
            max_bytes: Max bytes before rotation (default: 10MB)
            backup_count: Number of backup files to keep
            environment: Environment name used to pick the level

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('bladeview', format_type='json', level=logging.DEBUG)
        """
        from bladeview.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT
        if level is None:
            level = LoggerConfig.get_level_by_environment(environment or 'production')

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'local': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
