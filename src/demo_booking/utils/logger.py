#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging Configuration Module

Provides the configurable logging setup shared by the contact proxy, the
HubSpot clients and the command-line tools. Supports console and rotating
file handlers with plain or JSON formatting.
"""

import os
import sys
import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any, Union

# Default log levels
DEFAULT_CONSOLE_LEVEL = logging.INFO
DEFAULT_FILE_LEVEL = logging.DEBUG

# File rotation
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 3

# Environment variable names
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FILE_PATH = "LOG_FILE_PATH"
ENV_LOG_JSON = "LOG_JSON"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Global logger registry to avoid duplicate handlers
_loggers: Dict[str, logging.Logger] = {}


def _parse_level(value: Union[int, str, None], default: int) -> int:
    if value is None:
        return default
    if isinstance(value, int):
        return value
    if value.upper() in LOG_LEVELS:
        return LOG_LEVELS[value.upper()]
    try:
        return int(value)
    except ValueError:
        return default


class LoggerConfig:
    """Configuration class for logger settings."""

    def __init__(
        self,
        name: str = "demo_booking",
        console_level: Optional[Union[int, str]] = None,
        file_level: Optional[Union[int, str]] = None,
        log_file: Optional[str] = None,
        format_string: Optional[str] = None,
        json_logs: Optional[bool] = None,
        propagate: bool = True,
    ):
        """
        Initialize logger configuration.

        Args:
            name: Logger name
            console_level: Console logging level (int or string)
            file_level: File logging level (int or string)
            log_file: Path to log file (None to fall back to LOG_FILE_PATH,
                no file logging when that is unset too)
            format_string: Custom log format string
            json_logs: Whether to format logs as JSON (None reads LOG_JSON)
            propagate: Whether to propagate to parent loggers
        """
        self.name = name

        env_level = os.environ.get(ENV_LOG_LEVEL)
        env_level = _parse_level(env_level, None) if env_level else None

        if console_level is not None:
            self.console_level = _parse_level(console_level, DEFAULT_CONSOLE_LEVEL)
        elif env_level is not None:
            self.console_level = env_level
        else:
            self.console_level = DEFAULT_CONSOLE_LEVEL

        if file_level is not None:
            self.file_level = _parse_level(file_level, DEFAULT_FILE_LEVEL)
        elif env_level is not None:
            self.file_level = env_level
        else:
            self.file_level = DEFAULT_FILE_LEVEL

        self.log_file = log_file or os.environ.get(ENV_LOG_FILE_PATH) or None

        if format_string:
            self.format_string = format_string
        else:
            self.format_string = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"

        if json_logs is None:
            json_logs = os.environ.get(ENV_LOG_JSON, "false").lower() == "true"
        self.json_logs = json_logs
        self.propagate = propagate


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per log record.

    Used when the proxy runs behind a log aggregator.
    """

    def __init__(
        self,
        fmt_dict: Optional[Dict[str, Any]] = None,
        time_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        super().__init__()
        self.fmt_dict = fmt_dict or {
            "timestamp": "asctime",
            "level": "levelname",
            "name": "name",
            "module": "module",
            "function": "funcName",
            "line": "lineno",
            "message": "message",
        }
        self.time_format = time_format

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of the log record
        """
        record.asctime = self.formatTime(record, self.time_format)
        record.message = record.getMessage()

        log_record = {}
        for key, value in self.fmt_dict.items():
            if hasattr(record, value):
                log_record[key] = getattr(record, value)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def configure_logger(config: LoggerConfig = None) -> logging.Logger:
    """
    Configure a logger with the specified settings.

    Args:
        config: Logger configuration (or None for default)

    Returns:
        Configured logger
    """
    if config is None:
        config = LoggerConfig()

    if config.name in _loggers:
        return _loggers[config.name]

    logger = logging.getLogger(config.name)
    logger.setLevel(min(config.console_level, config.file_level) if config.log_file else config.console_level)
    logger.propagate = config.propagate

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if config.json_logs:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(config.format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(config.console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        os.makedirs(os.path.dirname(os.path.abspath(config.log_file)), exist_ok=True)

        file_handler = RotatingFileHandler(
            config.log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )

        file_handler.setLevel(config.file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[config.name] = logger

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger by name.

    Loggers below the ``demo_booking`` namespace inherit the handlers that
    configure_logging() installs on the package logger.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]
    return logging.getLogger(name)


def configure_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
    json_logs: Optional[bool] = None
) -> logging.Logger:
    """
    Configure the package logger used by every module of the service.

    Args:
        level: Logging level (int or string)
        log_file: Path to log file
        json_logs: Whether to format logs as JSON

    Returns:
        Configured package logger
    """
    config = LoggerConfig(
        name="demo_booking",
        console_level=level,
        file_level=level,
        log_file=log_file,
        json_logs=json_logs,
    )
    return configure_logger(config)


def reset_logging() -> None:
    """Drop handlers installed by configure_logger (used by tests and reloads)."""
    for name, logger in list(_loggers.items()):
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        del _loggers[name]


def log_integration_event(integration: str, event_type: str, message: str, level: int = logging.INFO) -> None:
    """
    Log an integration event.

    Args:
        integration: Integration name
        event_type: Type of event (create_contact, conflict, error, etc.)
        message: Event description
        level: Logging level
    """
    logger = get_logger("demo_booking.integration")
    logger.log(level, f"[{integration}] [{event_type}] {message}")


def mask_value(value: str) -> str:
    """Mask all but the first and last character of a value."""
    if len(value) > 6:
        return value[0] + "*" * (len(value) - 2) + value[-1]
    return "*" * len(value)


def log_sensitive(logger: logging.Logger, level: int, message: str, **sensitive_data) -> None:
    """
    Log a message while masking sensitive data.

    Args:
        logger: Logger to use
        level: Logging level
        message: Message to log
        sensitive_data: Keys and values to mask in the message
    """
    masked_message = message
    for key, value in sensitive_data.items():
        if value and isinstance(value, str):
            masked_message = masked_message.replace(value, mask_value(value))

    logger.log(level, masked_message)
