"""
Lighthouse Audit Types

Enums and constants for the lighthouse_audit capability.
"""

from enum import Enum


class AuditCategory(str, Enum):
    """Lighthouse audit category"""

    PERFORMANCE = "performance"
    ACCESSIBILITY = "accessibility"
    SEO = "seo"
    BEST_PRACTICES = "best-practices"
    PWA = "pwa"


class FormFactor(str, Enum):
    """Device emulation profile"""

    DESKTOP = "desktop"
    MOBILE = "mobile"


class OutputFormat(str, Enum):
    """Report file format"""

    HTML = "html"
    JSON = "json"


class AuditState(Enum):
    """Lifecycle of a single audit invocation"""

    IDLE = "idle"
    VALIDATING = "validating"
    ATTACHMENT_RESOLVING = "attachment_resolving"
    AUDIT_RUNNING = "audit_running"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = frozenset({AuditState.DONE, AuditState.FAILED})

# Formats are listed in the order their file descriptors are reported
MEDIA_TYPES = {
    OutputFormat.HTML: "text/html",
    OutputFormat.JSON: "application/json",
}

TOOL_NAME = "lighthouse_audit"
REPORT_PREFIX = "lighthouse"
DEBUGGING_PORT_FLAG = "--remote-debugging-port="
