"""Playwright browser client for blogpulse."""

from urllib.parse import urlparse

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    Request,
    Route,
    async_playwright,
)

from blogpulse.config import SUPPORTED_BROWSERS
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)

TRACKER_HOSTS = ("googletagmanager", "doubleclick", "adservice", "analytics", "facebook", "hotjar")

VIEWPORT = {"width": 1440, "height": 900}


class BrowserError(Exception):
    """Raised when the browser client is misused or cannot start."""


def _is_tracker(request: Request) -> bool:
    if request.resource_type == "document":
        return False
    hostname = urlparse(request.url).hostname or ""
    return any(host in hostname for host in TRACKER_HOSTS)


async def tracker_blocker(route: Route, request: Request) -> None:
    """Abort analytics and ad requests, let everything else through.

    Only the request host is matched, and page documents are never blocked.
    """
    if _is_tracker(request):
        await route.abort()
        return
    await route.continue_()


class BrowserClient:
    """Owns a Playwright driver, browser, context and a single page."""

    def __init__(
        self,
        base_url: str,
        browser_name: str = "chromium",
        headless: bool = True,
        timeout_ms: int = 30000,
        block_trackers: bool = True,
    ) -> None:
        if browser_name not in SUPPORTED_BROWSERS:
            raise BrowserError(f"unsupported browser: {browser_name}")
        self._base_url = base_url
        self._browser_name = browser_name
        self._headless = headless
        self._timeout_ms = timeout_ms
        self._block_trackers = block_trackers

        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def browser_name(self) -> str:
        return self._browser_name

    @property
    def page(self) -> Page:
        """The active page.

        Raises:
            BrowserError: If the client has not been started.
        """
        if self._page is None:
            raise BrowserError("browser client is not started")
        return self._page

    async def start(self) -> Page:
        """Launch the browser and open a page. Calling twice is a no-op."""
        if self._page is not None:
            return self._page

        logger.info(
            "Launching browser",
            browser=self._browser_name,
            headless=self._headless,
            base_url=self._base_url,
        )
        self._playwright = await async_playwright().start()
        try:
            launcher = getattr(self._playwright, self._browser_name)
            self._browser = await launcher.launch(headless=self._headless)
            self._context = await self._browser.new_context(
                base_url=self._base_url,
                viewport=VIEWPORT,
            )
            self._context.set_default_timeout(self._timeout_ms)
            if self._block_trackers:
                await self._context.route("**/*", tracker_blocker)
            self._page = await self._context.new_page()
        except Exception:
            # __aexit__ does not run when __aenter__ fails.
            await self.close()
            raise
        return self._page

    async def close(self) -> None:
        """Close page, context, browser and the driver, in that order."""
        try:
            if self._page is not None:
                await self._page.close()
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
        finally:
            self._page = None
            self._context = None
            self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
            logger.info("Browser closed", browser=self._browser_name)

    async def __aenter__(self) -> "BrowserClient":
        await self.start()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
