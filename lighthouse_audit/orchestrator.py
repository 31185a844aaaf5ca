"""
Audit orchestrator

Runs one lighthouse_audit invocation end to end:
validate -> resolve attachment -> prepare reports -> run engine -> assemble.

Every error is logged with the state it was raised in and propagates
unchanged. The engine is called exactly once and never retried.
"""

from typing import Any

from core.config import get_settings
from core.logging import get_logger

from .assembler import assemble_response
from .attachment import resolve_attachment
from .engine import LighthouseCliEngine
from .models import AttachmentTarget, AuditOutcome, AuditResponse, ReportDestination
from .report_sink import ReportNamer, prepare_report_destination
from .schemas import AuditRequest, parse_audit_params
from .types import TERMINAL_STATES, AuditState

logger = get_logger(__name__, domain="lighthouse")


class AuditOrchestrator:
    """Compose validation, attachment, report sink, engine and assembler"""

    def __init__(
        self,
        engine: Any = None,
        capture_snapshot: bool = False,
        base_dir: str | None = None,
        namer: ReportNamer | None = None,
    ):
        self.engine = engine or LighthouseCliEngine()
        self.capture_snapshot = capture_snapshot
        self.base_dir = base_dir
        self.namer = namer
        self.history: list[AuditState] = [AuditState.IDLE]

    @property
    def state(self) -> AuditState:
        return self.history[-1]

    def _transition(self, state: AuditState) -> None:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Audit already finished in state {self.state.value}")
        if state in self.history:
            raise RuntimeError(f"Audit state {state.value} cannot be re-entered")
        logger.debug(f"Audit state {self.state.value} -> {state.value}")
        self.history.append(state)

    async def invoke_engine(
        self, request: AuditRequest, target: AttachmentTarget, destination: ReportDestination
    ) -> AuditOutcome:
        """Single engine call for a validated request"""
        return await self.engine.play_audit(
            page=target.page,
            port=target.port,
            thresholds=request.thresholds,
            opts={
                "logLevel": get_settings().lighthouse_log_level,
                "onlyCategories": request.category_names(),
                "formFactor": request.form_factor.value,
            },
            reports={
                "formats": request.report_formats(),
                "name": destination.base_name,
                "directory": destination.directory,
            },
        )

    async def run(self, context: Any, raw_params: Any) -> AuditResponse:
        """
        Execute one audit against the context's current page

        Args:
            context: Host context exposing ensure_tab() and options.launch_options
            raw_params: Tool parameters as supplied by the caller

        Returns:
            AuditResponse with report files and category scores
        """
        if self.state is not AuditState.IDLE:
            raise RuntimeError("AuditOrchestrator runs a single audit, create a new one per call")

        try:
            self._transition(AuditState.VALIDATING)
            request = parse_audit_params(raw_params)

            self._transition(AuditState.ATTACHMENT_RESOLVING)
            target = await resolve_attachment(context)

            self._transition(AuditState.AUDIT_RUNNING)
            destination = prepare_report_destination(base_dir=self.base_dir, namer=self.namer)
            outcome = await self.invoke_engine(request, target, destination)

            self._transition(AuditState.ASSEMBLING)
            response = assemble_response(
                outcome,
                destination,
                request.report_formats(),
                target.port,
                self.capture_snapshot,
            )
        except BaseException as e:
            # Cancellation is a BaseException and still ends the audit as failed
            logger.error(f"Lighthouse audit failed while {self.state.value}: {e!r}")
            self.history.append(AuditState.FAILED)
            raise

        self._transition(AuditState.DONE)
        return response
