"""Article extraction through the browser for blogpulse."""

from playwright.async_api import Error as PlaywrightError

from blogpulse.models import Document
from blogpulse.pages.article import ArticlePage
from blogpulse.utils.logging import get_logger, log_step

logger = get_logger(__name__)


class ExtractionError(Exception):
    """Raised when an article page cannot be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ArticleExtractor:
    """Turns article URLs into Documents.

    ``extract`` never raises: any failure is recorded on the returned
    Document's ``error`` field with empty text.
    """

    def __init__(
        self,
        article_page: ArticlePage,
        min_text_length: int = 100,
        screenshots: bool = False,
        screenshot_suffix: str = "",
    ) -> None:
        self._page = article_page
        self._min_text_length = min_text_length
        self._screenshots = screenshots
        self._screenshot_suffix = screenshot_suffix

    async def extract(self, url: str, index: int) -> Document:
        """Extract one article.

        The text must be longer than ``min_text_length`` characters. Length is
        measured on the page text as extracted (whitespace collapsed), before
        the analyzer strips punctuation.

        Args:
            url: The article URL.
            index: 1-based position of the article in the batch.

        Returns:
            A populated Document, or one carrying ``error`` if extraction failed.
        """
        log_step(f"Processing article {index}: {url}")

        try:
            document = await self._extract(url, index)
        except ExtractionError as e:
            return self._failed(url, index, e.reason)
        except PlaywrightError as e:
            return self._failed(url, index, f"browser error: {e.message}")
        except Exception as e:
            logger.exception("Unexpected error extracting article", url=url, index=index)
            return self._failed(url, index, str(e) or type(e).__name__)

        log_step(f'Extracted article: "{document.title}" by {document.author}')
        log_step(f"Article text length: {len(document.text)} characters")
        return document

    async def _extract(self, url: str, index: int) -> Document:
        """Extract one article.

        Raises:
            ExtractionError: If the page did not load or has too little text.
        """
        await self._page.navigate_to_article(url)

        if not await self._page.is_article_page_loaded():
            raise ExtractionError("article page did not load")

        await self._page.scroll_through_article()

        title = await self._page.get_article_title()
        text = await self._page.get_article_text()
        author = await self._page.get_author()
        date = await self._page.get_publish_date()

        if len(text) <= self._min_text_length:
            raise ExtractionError(f"content too short ({len(text)} characters)")

        if self._screenshots:
            await self._page.take_screenshot(self._screenshot_name(f"article-{index}"))

        return Document(
            text=text,
            title=title,
            url=url,
            author=author,
            date=date,
            index=index,
        )

    def _screenshot_name(self, base: str) -> str:
        return f"{base}-{self._screenshot_suffix}" if self._screenshot_suffix else base

    def _failed(self, url: str, index: int, reason: str) -> Document:
        log_step(f"Error processing article {index}: {reason}", "FAIL", url=url)
        return Document(
            text="",
            title=f"Article {index} (Error)",
            url=url,
            author="Unknown",
            date="Unknown",
            index=index,
            error=reason,
        )
