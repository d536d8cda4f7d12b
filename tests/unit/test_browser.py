"""Unit tests for BrowserClient."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from blogpulse.clients.browser import BrowserClient, BrowserError, tracker_blocker


@pytest.fixture
def playwright() -> MagicMock:
    """Create a mock Playwright driver with a firefox launcher."""
    page = MagicMock()
    page.close = AsyncMock()

    context = MagicMock()
    context.route = AsyncMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    driver = MagicMock()
    driver.stop = AsyncMock()
    driver.firefox.launch = AsyncMock(return_value=browser)
    driver.chromium.launch = AsyncMock(return_value=browser)
    return driver


class TestBrowserClient:
    """Tests for browser lifecycle management."""

    async def test_lifecycle(self, playwright: MagicMock) -> None:
        with patch("blogpulse.clients.browser.async_playwright") as factory:
            factory.return_value.start = AsyncMock(return_value=playwright)

            async with BrowserClient(
                "https://example.com", browser_name="firefox", timeout_ms=1000
            ) as client:
                browser = playwright.firefox.launch.return_value
                context = browser.new_context.return_value
                assert client.page is context.new_page.return_value
                assert client.browser_name == "firefox"

        playwright.firefox.launch.assert_awaited_once_with(headless=True)
        browser.new_context.assert_awaited_once()
        assert browser.new_context.await_args.kwargs["base_url"] == "https://example.com"
        context.set_default_timeout.assert_called_once_with(1000)
        context.route.assert_awaited_once_with("**/*", tracker_blocker)
        context.new_page.return_value.close.assert_awaited_once()
        context.close.assert_awaited_once()
        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_no_route_when_not_blocking(self, playwright: MagicMock) -> None:
        with patch("blogpulse.clients.browser.async_playwright") as factory:
            factory.return_value.start = AsyncMock(return_value=playwright)
            client = BrowserClient("https://example.com", block_trackers=False)
            await client.start()
            await client.close()

        context = playwright.chromium.launch.return_value.new_context.return_value
        context.route.assert_not_awaited()

    async def test_driver_stops_when_close_fails(self, playwright: MagicMock) -> None:
        with patch("blogpulse.clients.browser.async_playwright") as factory:
            factory.return_value.start = AsyncMock(return_value=playwright)
            client = BrowserClient("https://example.com")
            await client.start()
            playwright.chromium.launch.return_value.close.side_effect = RuntimeError("crashed")

            with pytest.raises(RuntimeError):
                await client.close()

        playwright.stop.assert_awaited_once()
        with pytest.raises(BrowserError):
            _ = client.page

    async def test_driver_stops_when_launch_fails(self, playwright: MagicMock) -> None:
        playwright.chromium.launch.side_effect = RuntimeError("executable missing")

        with patch("blogpulse.clients.browser.async_playwright") as factory:
            factory.return_value.start = AsyncMock(return_value=playwright)
            with pytest.raises(RuntimeError, match="executable missing"):
                async with BrowserClient("https://example.com"):
                    pass

        playwright.stop.assert_awaited_once()

    def test_page_before_start(self) -> None:
        with pytest.raises(BrowserError, match="not started"):
            _ = BrowserClient("https://example.com").page

    def test_unsupported_browser(self) -> None:
        with pytest.raises(BrowserError, match="unsupported browser"):
            BrowserClient("https://example.com", browser_name="opera")


class TestTrackerBlocker:
    """Tests for the request route handler."""

    async def test_aborts_trackers(self) -> None:
        route = MagicMock()
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        request = MagicMock(url="https://www.googletagmanager.com/gtm.js", resource_type="script")

        await tracker_blocker(route, request)

        route.abort.assert_awaited_once()
        route.continue_.assert_not_awaited()

    async def test_continues_other_requests(self) -> None:
        route = MagicMock()
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        request = MagicMock(url="https://example.com/api/posts", resource_type="xhr")

        await tracker_blocker(route, request)

        route.continue_.assert_awaited_once()
        route.abort.assert_not_awaited()

    async def test_matches_host_not_path(self) -> None:
        route = MagicMock()
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        request = MagicMock(
            url="https://www.pointr.tech/blog/workplace-analytics-explained",
            resource_type="document",
        )

        await tracker_blocker(route, request)

        route.continue_.assert_awaited_once()
        route.abort.assert_not_awaited()

    async def test_site_assets_with_tracker_words_in_path(self) -> None:
        route = MagicMock()
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        request = MagicMock(
            url="https://www.pointr.tech/images/analytics-dashboard.png",
            resource_type="image",
        )

        await tracker_blocker(route, request)

        route.continue_.assert_awaited_once()
        route.abort.assert_not_awaited()

    async def test_never_blocks_documents(self) -> None:
        route = MagicMock()
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        request = MagicMock(url="https://www.facebook.com/pointr", resource_type="document")

        await tracker_blocker(route, request)

        route.continue_.assert_awaited_once()
        route.abort.assert_not_awaited()
