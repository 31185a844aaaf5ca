"""
Result assembler

Builds the tool response from the engine outcome. File paths are predicted
from the naming agreed with the report sink; the engine writes the files.
"""

from core.logging import get_logger

from .models import AuditOutcome, AuditResponse, GeneratedFile, ReportDestination
from .types import MEDIA_TYPES

logger = get_logger(__name__, domain="lighthouse")


def generated_files(destination: ReportDestination, formats: dict[str, bool]) -> list[GeneratedFile]:
    """File descriptors for every requested format, html before json"""
    return [
        GeneratedFile(path=destination.path_for(fmt.value), media_type=media_type)
        for fmt, media_type in MEDIA_TYPES.items()
        if formats.get(fmt.value)
    ]


def extract_scores(outcome: AuditOutcome) -> dict:
    """Category -> score exactly as reported by the engine"""
    return {name: record.get("score") for name, record in outcome.categories.items()}


def invocation_trace(port: int) -> list[str]:
    return [
        "# Lighthouse audit via the Lighthouse CLI",
        f"await play_audit(page=page, port={port}, ...)",
    ]


def assemble_response(
    outcome: AuditOutcome,
    destination: ReportDestination,
    formats: dict[str, bool],
    port: int,
    capture_snapshot: bool,
) -> AuditResponse:
    response = AuditResponse(
        code=invocation_trace(port),
        files=generated_files(destination, formats),
        scores=extract_scores(outcome),
        capture_snapshot=capture_snapshot,
        wait_for_network=False,
    )
    logger.info(f"Lighthouse audit result: {response.scores}")
    return response
