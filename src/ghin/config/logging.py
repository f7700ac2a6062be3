"""Logging configuration utilities."""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path

from ghin.config.logging_filters import SensitiveDataFilter

LOGGER_NAME = 'ghin'


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_timestamp: bool = True):
        """Initialize formatter.

        Args:
            include_timestamp: Whether to include timestamp in output
        """
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted string
        """
        data = {
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if self.include_timestamp:
            data['timestamp'] = datetime.fromtimestamp(record.created).isoformat()

        if record.exc_info:
            data['exception'] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            data.update(record.extra_fields)

        return json.dumps(data, default=str)

class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]
        msg = record.getMessage()

        context = ""
        if hasattr(record, 'extra_fields'):
            fields = [f"\n    {key}: {value}" for key, value in record.extra_fields.items()]
            if fields:
                context = " |" + "".join(fields)

        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        return f"{color}{timestamp} - {record.name} - {record.levelname} - {msg}{context}{self.RESET}"

def get_file_handler(
    log_file: str | Path,
    formatter: logging.Formatter,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> logging.handlers.RotatingFileHandler:
    """Create rotating file handler.

    Args:
        log_file: Path to log file
        formatter: Formatter to use
        max_bytes: Maximum file size in bytes
        backup_count: Number of backup files to keep

    Returns:
        Configured file handler
    """
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count
    )
    file_handler.setFormatter(formatter)
    return file_handler

def setup_logging(verbose: bool = False, log_file: str | Path | None = None, json_format: bool = False) -> logging.Logger:
    """Set up logging for the ``ghin`` package.

    Args:
        verbose: Log at DEBUG instead of WARNING
        log_file: Optional file that receives DEBUG output
        json_format: Emit JSON lines on the console instead of colored text

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(JsonFormatter() if json_format else ColoredFormatter())
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = get_file_handler(log_file, JsonFormatter(include_timestamp=True))
        file_handler.setLevel(logging.DEBUG)
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    # Keep urllib3 connection chatter out of verbose output
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    return logger
