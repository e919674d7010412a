"""
Logging Configuration

Structured logging with JSON output for production.
Supports:
- Multiple log levels
- JSON and text formats
- File and console output
- Security event categories
"""

import logging
import sys
from enum import Enum
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from safeguard.config import Settings, get_settings


class EventType(str, Enum):
    """Category attached to every security log record."""

    SECURITY = "security"
    USABILITY = "usability"
    PERFORMANCE = "performance"
    FUNCTIONALITY = "functionality"


def setup_logging(settings: Optional[Settings] = None):
    """
    Configure application logging.

    Sets up:
    - Log level from settings
    - JSON or text format
    - Console and file handlers
    - Structlog processors
    """
    settings = settings or get_settings()

    # Get log level
    log_level = getattr(logging, settings.LOG_LEVEL.upper())

    # Configure root logger
    logging.root.setLevel(log_level)
    logging.root.handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    # Format
    if settings.LOG_FORMAT == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s %(event_type)s %(module_name)s",
            rename_fields={
                "levelname": "level",
                "name": "logger",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    logging.root.addHandler(console_handler)

    # File handler (if configured)
    if settings.LOG_FILE:
        try:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logging.root.addHandler(file_handler)
        except OSError as e:
            logging.error(f"Failed to setup file logging: {e}")

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)


class SecurityLogger:
    """
    Security log channel for one module.

    Every record carries the event category and the originating module
    so the security log can be filtered independently of normal app logs.
    """

    def __init__(self, logger: logging.Logger, module_name: str):
        """Initialize security logger."""
        self.logger = logger
        self.module_name = module_name

    def _log(self, level: int, event_type: EventType, msg: str, **kwargs):
        """Log message with event context."""
        extra = {
            "event_type": EventType(event_type).value,
            "module_name": self.module_name,
            **kwargs.pop("extra", {}),
        }
        self.logger.log(level, msg, extra=extra, **kwargs)

    def debug(self, event_type: EventType, msg: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, event_type, msg, **kwargs)

    def info(self, event_type: EventType, msg: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, event_type, msg, **kwargs)

    def warning(self, event_type: EventType, msg: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, event_type, msg, **kwargs)

    def error(self, event_type: EventType, msg: str, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, event_type, msg, **kwargs)

    def critical(self, event_type: EventType, msg: str, **kwargs):
        """Log critical message."""
        self._log(logging.CRITICAL, event_type, msg, **kwargs)


def get_security_logger(module_name: str) -> SecurityLogger:
    """
    Get a security logger for a module.

    Args:
        module_name: Component name shown in every record

    Returns:
        SecurityLogger: Logger writing under ``safeguard.security``
    """
    return SecurityLogger(logging.getLogger(f"safeguard.security.{module_name}"), module_name)
