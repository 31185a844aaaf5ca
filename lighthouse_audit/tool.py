"""
lighthouse_audit tool descriptor and handler factory
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from .models import AuditResponse
from .orchestrator import AuditOrchestrator
from .schemas import audit_input_schema
from .types import TOOL_NAME

ToolHandler = Callable[[Any, Any], Awaitable[AuditResponse]]


@dataclass(frozen=True)
class ToolSchema:
    """Capability descriptor presented to the host"""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}


@dataclass(frozen=True)
class Tool:
    capability: str
    schema: ToolSchema
    handle: ToolHandler


def lighthouse_audit_tool(
    capture_snapshot: bool,
    engine: Any = None,
    base_dir: str | None = None,
) -> Tool:
    """
    Build the lighthouse_audit tool

    Args:
        capture_snapshot: Echoed back so the host knows whether to snapshot the page
        engine: Audit engine, defaults to the Lighthouse CLI
        base_dir: Base directory for lighthouse-reports, defaults to settings or cwd
    """

    async def handle(context: Any, params: Any) -> AuditResponse:
        # Fresh orchestrator per call, nothing is shared between audits
        orchestrator = AuditOrchestrator(engine=engine, capture_snapshot=capture_snapshot, base_dir=base_dir)
        return await orchestrator.run(context, params)

    return Tool(
        capability="core",
        schema=ToolSchema(
            name=TOOL_NAME,
            description="Run Google Lighthouse against the current page",
            input_schema=audit_input_schema(),
        ),
        handle=handle,
    )


def build_tools(capture_snapshot: bool, **kwargs) -> list[Tool]:
    return [lighthouse_audit_tool(capture_snapshot, **kwargs)]
