"""Article page object and text extraction strategies."""

import re
from collections.abc import Awaitable, Callable

import lxml.html
import trafilatura
from playwright.async_api import Error as PlaywrightError
from readability import Document as ReadabilityDocument

from blogpulse.models import UNKNOWN_AUTHOR, UNKNOWN_DATE, UNKNOWN_TITLE
from blogpulse.pages.base import BasePage
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)

BY_PREFIX = re.compile(r"^by\s+", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")

TEXT_ELEMENTS_SCRIPT = """elements => elements
    .map(el => (el.textContent || '').trim())
    .filter(text => text.length > 0)"""


def collapse_whitespace(text: str) -> str:
    return WHITESPACE.sub(" ", text).strip()


class ArticlePage(BasePage):
    """Interactions with a single blog article page."""

    selectors = {
        "article_title": "section[class=blog-post-main] h1",
        "paragraphs": "p",
        "text_elements": "p, h1, h2, h3, h4, h5, h6, li",
    }

    title_selectors = ("section[class=blog-post-main] h1", "article h1", "h1")
    author_selectors = (".author", '[class*="author"]', 'a:has-text("by ")')
    date_selectors = (".date", '[class*="date"]', "time")

    # Milliseconds to let lazy content settle after scrolling.
    scroll_settle_ms = 1000
    top_settle_ms = 500

    async def navigate_to_article(self, url: str) -> None:
        await self.goto(url)
        await self.wait_for_page_load()

    async def is_article_page_loaded(self) -> bool:
        """Check the article title and some paragraph text are present."""
        try:
            title_exists = await self.is_element_present(self.selectors["article_title"])
            return title_exists and await self.has_article_text()
        except PlaywrightError as e:
            logger.error("Error checking if article page loaded", error=str(e))
            return False

    async def has_article_text(self) -> bool:
        paragraphs = await self.page.query_selector_all(self.selectors["paragraphs"])
        return len(paragraphs) > 0

    async def get_article_title(self) -> str:
        return await self.first_text(self.title_selectors) or UNKNOWN_TITLE

    async def get_author(self) -> str:
        author = await self.first_text(self.author_selectors)
        if author:
            author = BY_PREFIX.sub("", author).strip()
        return author or UNKNOWN_AUTHOR

    async def get_publish_date(self) -> str:
        return await self.first_text(self.date_selectors) or UNKNOWN_DATE

    async def get_article_text(self) -> str:
        """Return the article's visible text with whitespace collapsed.

        Strategies run in order until one yields text: the page's text
        elements, trafilatura on the rendered HTML, then readability-lxml.
        Returns an empty string if none does.
        """
        strategies: list[tuple[str, Callable[[], Awaitable[str]]]] = [
            ("elements", self._text_from_elements),
            ("trafilatura", self._text_from_trafilatura),
            ("readability", self._text_from_readability),
        ]
        for name, strategy in strategies:
            text = collapse_whitespace(await strategy())
            if text:
                logger.debug("Article text extracted", strategy=name, length=len(text))
                return text
            logger.debug("Text strategy produced nothing", strategy=name)
        return ""

    async def _text_from_elements(self) -> str:
        try:
            texts = await self.page.eval_on_selector_all(
                self.selectors["text_elements"], TEXT_ELEMENTS_SCRIPT
            )
        except PlaywrightError as e:
            logger.warning("Error reading text elements", error=str(e))
            return ""
        return " ".join(texts)

    async def _page_html(self) -> str:
        try:
            return await self.page.content()
        except PlaywrightError as e:
            logger.warning("Error reading page HTML", error=str(e))
            return ""

    async def _text_from_trafilatura(self) -> str:
        html = await self._page_html()
        if not html:
            return ""
        content = trafilatura.extract(
            html,
            include_comments=False,
            include_tables=False,
        )
        return content or ""

    async def _text_from_readability(self) -> str:
        html = await self._page_html()
        if not html:
            return ""
        try:
            summary = ReadabilityDocument(html).summary()
            return " ".join(lxml.html.fromstring(summary).itertext())
        except Exception as e:
            logger.debug("Readability extraction failed", error=str(e))
            return ""

    async def scroll_through_article(self) -> None:
        """Scroll to the bottom so lazy content loads, then back to the top."""
        await self.scroll_to_bottom()
        await self.page.wait_for_timeout(self.scroll_settle_ms)
        await self.scroll_to_top()
        await self.page.wait_for_timeout(self.top_settle_ms)
