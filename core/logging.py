"""
Structured logging configuration
Supports both JSON and text formats for different environments
"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from core.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["app"] = settings.app_name
        log_record["environment"] = settings.environment
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def setup_logging() -> None:
    """Configure logging based on environment settings"""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries CLI output, logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)

    if settings.log_format == "json":
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", timestamp=True)
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter to add context to all log messages"""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Add context to log messages"""
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra

        return msg, kwargs

    def with_context(self, **context) -> "LoggerAdapter":
        """Create a new logger with additional context"""
        new_extra = self.extra.copy()
        new_extra.update(context)
        return LoggerAdapter(self.logger, new_extra)


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Get a logger instance with optional context

    Args:
        name: Logger name (usually __name__)
        **context: Additional context to include in all logs

    Returns:
        LoggerAdapter instance

    Example:
        logger = get_logger(__name__, domain="lighthouse")
        logger.info("Audit finished", extra={"port": 9222})
    """
    logger = logging.getLogger(name)
    return LoggerAdapter(logger, context)
