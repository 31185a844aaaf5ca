"""Core utilities and configuration for the Lighthouse audit tool"""
from core.config import settings
from core.exceptions import AuditEngineError, ConfigurationError, LighthouseToolError, ValidationError
from core.logging import get_logger

__all__ = [
    "settings",
    "get_logger",
    "LighthouseToolError",
    "ValidationError",
    "ConfigurationError",
    "AuditEngineError",
]
