"""
Lighthouse Audit - web quality audits against a live browser page

Validates audit options, attaches Lighthouse to the host browser through its
remote-debugging port, gates category scores on thresholds and reports the
generated html/json artifacts.
"""

from .models import AttachmentTarget, AuditOutcome, AuditResponse, GeneratedFile, ReportDestination
from .orchestrator import AuditOrchestrator
from .schemas import AuditRequest, audit_input_schema, parse_audit_params
from .tool import Tool, ToolSchema, build_tools, lighthouse_audit_tool
from .types import AuditCategory, AuditState, FormFactor, OutputFormat

__all__ = [
    # Models
    "AuditRequest",
    "AttachmentTarget",
    "ReportDestination",
    "AuditOutcome",
    "AuditResponse",
    "GeneratedFile",
    # Types
    "AuditCategory",
    "AuditState",
    "FormFactor",
    "OutputFormat",
    # Tool
    "AuditOrchestrator",
    "Tool",
    "ToolSchema",
    "audit_input_schema",
    "build_tools",
    "lighthouse_audit_tool",
    "parse_audit_params",
]
