"""Base page object shared by all pages."""

from collections.abc import Sequence
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from blogpulse.utils.files import ensure_directory
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)


class BasePage:
    """Common navigation, waiting and lookup helpers around a Playwright page."""

    def __init__(
        self,
        page: Page,
        screenshots_dir: str | Path = "screenshots",
        element_timeout_ms: int = 5000,
    ) -> None:
        self.page = page
        self._screenshots_dir = Path(screenshots_dir)
        self._element_timeout_ms = element_timeout_ms

    async def goto(self, url: str) -> None:
        await self.page.goto(url)

    async def wait_for_page_load(self) -> None:
        """Wait until the network has been idle, i.e. lazy content has arrived."""
        await self.page.wait_for_load_state("networkidle")

    async def take_screenshot(self, name: str) -> Path:
        """Save a full-page PNG screenshot and return its path."""
        path = ensure_directory(self._screenshots_dir) / f"{name}.png"
        await self.page.screenshot(path=str(path), full_page=True)
        logger.debug("Screenshot saved", path=str(path))
        return path

    async def click(self, selector: str) -> None:
        await self.page.click(selector)

    async def is_element_present(self, selector: str) -> bool:
        """Wait briefly for an element; False if it never shows up."""
        try:
            await self.page.wait_for_selector(selector, timeout=self._element_timeout_ms)
            return True
        except PlaywrightError:
            return False

    async def scroll_to_bottom(self) -> None:
        await self.page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")

    async def scroll_to_top(self) -> None:
        await self.page.evaluate("() => window.scrollTo(0, 0)")

    async def first_text(self, selectors: Sequence[str]) -> str | None:
        """Return the trimmed text of the first selector that has any.

        Selectors are tried in order; a selector that errors or matches an
        empty element is skipped.
        """
        for selector in selectors:
            try:
                element = await self.page.query_selector(selector)
                if element is None:
                    continue
                text = await element.text_content()
            except PlaywrightError as e:
                logger.debug("Selector lookup failed", selector=selector, error=str(e))
                continue
            if text and text.strip():
                return text.strip()
        return None
