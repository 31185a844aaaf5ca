"""
Attachment resolver

Derives the remote-debugging port Lighthouse attaches to from the launch
arguments of the host's browser. Only reads configuration, never controls the
browser.
"""

from collections.abc import Iterable
from typing import Any

from core.exceptions import ConfigurationError
from core.logging import get_logger

from .models import AttachmentTarget
from .types import DEBUGGING_PORT_FLAG

logger = get_logger(__name__, domain="lighthouse")

MISSING_PORT_MESSAGE = (
    "The Playwright browser was not launched with --remote-debugging-port=<n>. "
    "Restart the host with that flag so Lighthouse can attach."
)


def resolve_debugging_port(launch_args: Iterable[str] | None) -> int:
    """
    Extract the remote-debugging port from browser launch arguments

    Args:
        launch_args: Arguments the browser was launched with

    Returns:
        Port number as an integer

    Raises:
        ConfigurationError: if the flag is missing or not a valid port
    """
    raw_port = None
    for arg in launch_args or ():
        if arg.startswith(DEBUGGING_PORT_FLAG):
            raw_port = arg.split("=", 1)[1]
            break

    if not raw_port:
        raise ConfigurationError(MISSING_PORT_MESSAGE, setting="remote-debugging-port")

    # int() would also take " 9222", "+9222" and "9_222"
    if not (raw_port.isascii() and raw_port.isdigit()):
        raise ConfigurationError(
            f"Invalid remote-debugging port {raw_port!r}, expected an integer", setting="remote-debugging-port"
        )
    port = int(raw_port)

    if not 1 <= port <= 65535:
        raise ConfigurationError(
            f"Remote-debugging port {port} is outside 1-65535", setting="remote-debugging-port"
        )

    return port


def launch_args_of(context: Any) -> list[str]:
    """Launch arguments exposed by a host context, empty when not configured"""
    launch_options = getattr(context.options, "launch_options", None)
    return list(getattr(launch_options, "args", None) or [])


async def resolve_attachment(context: Any) -> AttachmentTarget:
    """
    Resolve the page and debugging port for the current host context

    The port is resolved before the tab so a misconfigured browser fails
    without opening a page.
    """
    port = resolve_debugging_port(launch_args_of(context))
    tab = await context.ensure_tab()
    logger.with_context(port=port).debug("Attaching Lighthouse to the browser")
    return AttachmentTarget(page=tab.page, port=port)
