"""
Playwright host context

Owns the Chromium instance and the page tools operate on. Chromium is
launched with --remote-debugging-port so Lighthouse can attach to it.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from playwright.async_api import async_playwright

from core.config import get_settings
from core.logging import get_logger

logger = get_logger(__name__, domain="host")


@dataclass
class LaunchOptions:
    """Chromium launch options"""

    args: list[str] = field(default_factory=list)
    headless: bool = True

    def to_playwright_options(self) -> dict[str, Any]:
        return {"headless": self.headless, "args": list(self.args)}


@dataclass
class ContextOptions:
    launch_options: LaunchOptions = field(default_factory=LaunchOptions)


@dataclass
class Tab:
    page: Any


def default_launch_options(port: Optional[int] = None, headless: Optional[bool] = None) -> LaunchOptions:
    settings = get_settings()
    port = port or settings.browser_debugging_port
    return LaunchOptions(
        args=[f"--remote-debugging-port={port}", "--no-first-run", "--disable-dev-shm-usage"],
        headless=settings.browser_headless if headless is None else headless,
    )


class PlaywrightContext:
    """Execution context handed to tool handlers"""

    def __init__(self, options: Optional[ContextOptions] = None):
        self.options = options or ContextOptions(launch_options=default_launch_options())
        self._playwright = None
        self._browser = None
        self._tab: Optional[Tab] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            **self.options.launch_options.to_playwright_options()
        )
        logger.info("Playwright browser launched successfully")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self._browser:
            await self._browser.close()
            logger.debug("Browser closed")
        if self._playwright:
            await self._playwright.stop()
            logger.debug("Playwright stopped")
        self._tab = None

    async def ensure_tab(self) -> Tab:
        """Return the current tab, opening one on first use"""
        if self._browser is None:
            raise RuntimeError("PlaywrightContext must be entered before use")
        if self._tab is None or self._tab.page.is_closed():
            page = await self._browser.new_page()
            self._tab = Tab(page=page)
        return self._tab

    async def navigate(self, url: str) -> Tab:
        tab = await self.ensure_tab()
        await tab.page.goto(url)
        logger.info(f"Navigated to {url}")
        return tab
