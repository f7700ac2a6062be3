"""
Logging utilities for the GHIN client.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any
from typing import TypeVar

from typing_extensions import ParamSpec


T = TypeVar('T')
P = ParamSpec('P')

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)

def log_execution(level: str = 'DEBUG') -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to log function execution with timing.

    Arguments are never logged since the wrapped calls carry credentials.
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            logger = logging.getLogger(func.__module__)
            start_time = datetime.now()
            logger.log(getattr(logging, level), f"Calling {func.__name__}")

            try:
                result = func(*args, **kwargs)
                duration = datetime.now() - start_time
                logger.log(getattr(logging, level),
                    f"{func.__name__} completed in {duration.total_seconds():.3f}s")
                return result
            except Exception as e:
                duration = datetime.now() - start_time
                logger.error(
                    f"{func.__name__} failed after {duration.total_seconds():.3f}s: {e!s}"
                )
                raise

        return wrapper
    return decorator

class LoggerMixin:
    """Mixin class that provides a module logger with optional context."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__module__)
        self._log_context: dict[str, Any] = {}

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    def set_log_context(self, **kwargs: Any) -> None:
        """Set context values for all subsequent log messages."""
        self._log_context.update(kwargs)

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        """Log with context attached as structured ``extra_fields``."""
        context = {**self._log_context, **kwargs}
        if context:
            self.logger.log(level, msg, extra={'extra_fields': context})
        else:
            self.logger.log(level, msg)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a debug message with context."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an info message with context."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a warning message with context."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an error message with context."""
        self._log(logging.ERROR, msg, **kwargs)
