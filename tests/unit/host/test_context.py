"""
Tests for the Playwright host context
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from host.context import ContextOptions, LaunchOptions, PlaywrightContext, default_launch_options
from lighthouse_audit.attachment import resolve_debugging_port

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_playwright():
    """async_playwright() double with a browser handing out pages"""
    page = MagicMock()
    page.is_closed.return_value = False
    page.goto = AsyncMock()

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)

    with patch("host.context.async_playwright", return_value=manager):
        yield playwright, browser, page


class TestLaunchOptions:
    def test_default_options_expose_debugging_port(self):
        options = default_launch_options(port=9333, headless=True)

        assert resolve_debugging_port(options.args) == 9333
        assert options.to_playwright_options()["headless"] is True

    def test_port_defaults_to_settings(self):
        settings = MagicMock(browser_debugging_port=9444, browser_headless=False)
        with patch("host.context.get_settings", return_value=settings):
            options = default_launch_options()

        assert "--remote-debugging-port=9444" in options.args
        assert options.headless is False


class TestPlaywrightContext:
    async def test_launch_uses_options(self, mock_playwright):
        playwright, browser, _ = mock_playwright
        options = ContextOptions(launch_options=LaunchOptions(args=["--remote-debugging-port=9222"], headless=True))

        async with PlaywrightContext(options):
            pass

        playwright.chromium.launch.assert_awaited_once_with(headless=True, args=["--remote-debugging-port=9222"])
        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_ensure_tab_reuses_page(self, mock_playwright):
        _, browser, page = mock_playwright

        async with PlaywrightContext() as context:
            first = await context.ensure_tab()
            second = await context.ensure_tab()

        assert first is second
        assert first.page is page
        browser.new_page.assert_awaited_once()

    async def test_closed_page_is_replaced(self, mock_playwright):
        _, browser, page = mock_playwright

        async with PlaywrightContext() as context:
            await context.ensure_tab()
            page.is_closed.return_value = True
            await context.ensure_tab()

        assert browser.new_page.await_count == 2

    async def test_navigate(self, mock_playwright):
        _, _, page = mock_playwright

        async with PlaywrightContext() as context:
            tab = await context.navigate("https://example.com/")

        page.goto.assert_awaited_once_with("https://example.com/")
        assert tab.page is page

    async def test_ensure_tab_requires_entered_context(self):
        with pytest.raises(RuntimeError):
            await PlaywrightContext().ensure_tab()
