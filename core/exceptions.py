"""
Custom exceptions for the Lighthouse audit tool
Provides structured error handling across the audit pipeline
"""
from typing import Any, Dict, List, Optional


class LighthouseToolError(Exception):
    """Base exception for all audit tool errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for tool responses"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(LighthouseToolError):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **details} if field else details,
        )
        self.field = field


class ConfigurationError(LighthouseToolError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
        )
        self.setting = setting


class AuditEngineError(LighthouseToolError):
    """Raised when the audit engine fails to produce a result"""

    def __init__(self, message: str, error_code: str = "AUDIT_ENGINE_ERROR", **details):
        super().__init__(message=message, error_code=error_code, details=details)


class ThresholdViolationError(AuditEngineError):
    """Raised when one or more category scores fall below their threshold"""

    def __init__(self, failures: List[Dict[str, Any]]):
        summary = ", ".join(
            f"{failure['category']} {failure['score']} < {failure['threshold']}" for failure in failures
        )
        super().__init__(
            message=f"Lighthouse thresholds not met: {summary}",
            error_code="THRESHOLD_VIOLATION",
            failures=failures,
        )
        self.failures = failures
