"""
Report sink

Prepares the directory Lighthouse writes its reports into and hands out
unique, timestamp-based base names (lighthouse-<epoch-ms>).
"""

import os
import threading
import time
from collections.abc import Callable

from core.config import get_settings
from core.logging import get_logger

from .models import ReportDestination
from .types import REPORT_PREFIX

logger = get_logger(__name__, domain="lighthouse")


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class ReportNamer:
    """Issues strictly increasing millisecond stamps for report base names"""

    def __init__(self, clock: Callable[[], int] = _epoch_ms, prefix: str = REPORT_PREFIX):
        self.clock = clock
        self.prefix = prefix
        self._last_stamp = 0
        self._lock = threading.Lock()

    def next_stamp(self) -> int:
        with self._lock:
            # Two calls in the same millisecond get consecutive stamps
            stamp = max(int(self.clock()), self._last_stamp + 1)
            self._last_stamp = stamp
            return stamp

    def next_name(self) -> str:
        return f"{self.prefix}-{self.next_stamp()}"


default_namer = ReportNamer()


def resolve_base_dir(base_dir: str | None = None) -> str:
    """Explicit base directory, else the configured one, else the working directory"""
    if base_dir:
        return base_dir
    configured = get_settings().lighthouse_reports_base_dir
    return configured or os.getcwd()


def prepare_report_destination(
    base_dir: str | None = None,
    subdir: str | None = None,
    namer: ReportNamer | None = None,
) -> ReportDestination:
    """
    Ensure the report directory exists and pick a unique base name

    Args:
        base_dir: Directory holding the report subdirectory
        subdir: Report subdirectory name, defaults to the configured one
        namer: Base name source, defaults to the process-wide namer

    Returns:
        ReportDestination; no report files are created here
    """
    subdir = subdir or get_settings().lighthouse_reports_subdir
    directory = os.path.join(resolve_base_dir(base_dir), subdir)
    os.makedirs(directory, exist_ok=True)

    base_name = (namer or default_namer).next_name()
    logger.debug(f"Reports for this audit go to {directory}/{base_name}.*")
    return ReportDestination(directory=directory, base_name=base_name)
