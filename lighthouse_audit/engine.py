"""
Lighthouse engine adapter

Runs the Lighthouse CLI against an already running Chromium through its
remote-debugging port, places the requested reports under the agreed names
and applies threshold gating on the category scores.

Engine contract:
    play_audit(page, port, thresholds, opts={logLevel, ...},
               reports={formats, name, directory}) -> AuditOutcome
"""

import asyncio
import json
import os
import shutil
import tempfile
from typing import Any

from core.config import get_settings
from core.exceptions import AuditEngineError, ThresholdViolationError
from core.logging import get_logger

from .models import AuditOutcome
from .types import FormFactor, OutputFormat

logger = get_logger(__name__, domain="lighthouse")


def check_thresholds(lhr: dict[str, Any], thresholds: dict[str, float] | None) -> list[dict[str, Any]]:
    """
    Compare category scores (0-1) against minimums (0-100)

    Thresholds for categories missing from the result are ignored. A category
    Lighthouse could not score counts as 0.
    """
    failures = []
    categories = lhr.get("categories", {})
    for category, minimum in (thresholds or {}).items():
        record = categories.get(category)
        if record is None:
            continue
        # Rounded so 0.29 reads as 29 and not 28.999999999999996
        score = round((record.get("score") or 0) * 100, 2)
        if score < minimum:
            failures.append({"category": category, "score": score, "threshold": minimum})
    return failures


class LighthouseCliEngine:
    """Audit engine backed by the Lighthouse CLI"""

    def __init__(self, binary: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self.binary = binary or settings.lighthouse_binary
        self.timeout = timeout if timeout is not None else settings.lighthouse_timeout_seconds

    def build_command(self, url: str, port: int, opts: dict[str, Any], output_base: str) -> list[str]:
        """Lighthouse CLI invocation; json is always produced to read the scores"""
        cmd = [
            self.binary,
            url,
            f"--port={port}",
            f"--output={OutputFormat.JSON.value}",
            f"--output={OutputFormat.HTML.value}",
            f"--output-path={output_base}",
            f"--log-level={opts.get('logLevel', 'error')}",
        ]

        only_categories = opts.get("onlyCategories")
        if only_categories:
            cmd.append(f"--only-categories={','.join(only_categories)}")

        if opts.get("formFactor") == FormFactor.MOBILE.value:
            cmd.append("--form-factor=mobile")
        elif opts.get("formFactor") == FormFactor.DESKTOP.value:
            cmd.append("--preset=desktop")

        return cmd

    async def _run(self, cmd: list[str]) -> None:
        logger.info(f"Running Lighthouse CLI: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
            )
        except FileNotFoundError:
            raise AuditEngineError(f"Lighthouse CLI not found: {self.binary}", binary=self.binary)

        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise AuditEngineError(f"Lighthouse audit timed out after {self.timeout}s", timeout=self.timeout)
        except asyncio.CancelledError:
            # The output directory goes away with the caller, stop the CLI first
            logger.warning("Lighthouse audit cancelled, killing the CLI")
            process.kill()
            await process.wait()
            raise

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip()
            logger.error(f"Lighthouse CLI failed with return code {process.returncode}")
            raise AuditEngineError(
                f"Lighthouse CLI failed: {message}", returncode=process.returncode, stderr=message
            )

    async def play_audit(
        self,
        *,
        page: Any,
        port: int,
        thresholds: dict[str, float] | None = None,
        opts: dict[str, Any] | None = None,
        reports: dict[str, Any] | None = None,
    ) -> AuditOutcome:
        """
        Audit the page currently loaded in the attached browser

        Args:
            page: Playwright page, only its URL is read
            port: Remote-debugging port of the browser owning the page
            thresholds: Optional category -> minimum score (0-100)
            opts: Engine flags (logLevel, onlyCategories, formFactor)
            reports: formats, name and directory for the report files

        Returns:
            AuditOutcome wrapping the Lighthouse result

        Raises:
            AuditEngineError: if Lighthouse fails or its result is unreadable
            ThresholdViolationError: if a category falls below its threshold
        """
        opts = opts or {}
        reports = reports or {}
        name = reports.get("name") or "lighthouse"

        with tempfile.TemporaryDirectory(prefix="lighthouse-") as tmp_dir:
            output_base = os.path.join(tmp_dir, name)
            await self._run(self.build_command(page.url, port, opts, output_base))

            # Multiple outputs are written as <base>.report.<ext>
            json_path = f"{output_base}.report.json"
            try:
                with open(json_path) as f:
                    lhr = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise AuditEngineError(f"Unreadable Lighthouse result: {e}", path=json_path)

            directory = reports.get("directory")
            if directory:
                for extension, enabled in (reports.get("formats") or {}).items():
                    if enabled:
                        shutil.move(
                            f"{output_base}.report.{extension}", os.path.join(directory, f"{name}.{extension}")
                        )

        failures = check_thresholds(lhr, thresholds)
        if failures:
            logger.error(f"Lighthouse thresholds not met: {failures}")
            raise ThresholdViolationError(failures)

        return AuditOutcome(lhr=lhr)
