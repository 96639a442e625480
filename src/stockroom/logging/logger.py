# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Logger implementation for stockroom.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

from stockroom.errors import StockroomError
from stockroom.logging.config import LoggingSettings
from stockroom.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

CONTEXT_ATTR = "stockroom_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})
        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data, default=self._format_value)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> Any:
        """Format a value for text output or as a JSON fallback."""
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, StockroomError):
            return json.dumps(value.to_dict(), default=str)
        if isinstance(value, BaseException):
            return f"{type(value).__name__}: {value}"
        return str(value)


class StockroomLogger:
    """Default logger for stockroom.

    Wraps a standard library logger and attaches keyword context to every
    record so the StructuredFormatter can render it.
    """

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level, overriding the settings
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}
        self._configure(level or self._settings.level)

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    @property
    def level(self) -> int:
        return self._logger.level

    def _configure(self, level: str) -> None:
        self._logger.setLevel(LogLevel.from_string(level).to_stdlib_level())

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        # stdout is reserved for command output
        if self._settings.console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _log(self, level: int, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        combined_context = {**self._bound_context, **self._context, **kwargs}
        self._logger.log(
            level, msg, exc_info=exc_info, extra={CONTEXT_ATTR: combined_context}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error message with the active exception's traceback."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)

    def set_level(self, level: LogLevel | str) -> None:
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._logger.setLevel(level.to_stdlib_level())

    def add_handler(self, handler: logging.Handler) -> None:
        """Attach an extra handler using this logger's formatter settings."""
        if handler.formatter is None:
            handler.setFormatter(
                StructuredFormatter(
                    json_format=self._settings.json_format,
                    include_timestamp=self._settings.include_timestamp,
                    include_level=self._settings.include_level,
                )
            )
        self._logger.addHandler(handler)

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> StockroomLogger:
        """Create a logger view with bound context values.

        The returned logger shares the underlying standard library logger, so
        handlers and level stay in sync with this one.
        """
        bound = object.__new__(StockroomLogger)
        bound.name = self.name
        bound._settings = self._settings
        bound._logger = self._logger
        bound._bound_context = {**self._bound_context, **kwargs}
        bound._context = {}
        return bound


def set_package_level(level: LogLevel, prefix: str = "stockroom") -> None:
    """Set the level of every existing logger under prefix, keeping handlers."""
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level.to_stdlib_level())


def get_logger(name: str, level: LogLevel | None = None) -> StockroomLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    logger = StockroomLogger(name, settings=LoggingSettings.load())
    if level is not None:
        logger.set_level(level)
    return logger
