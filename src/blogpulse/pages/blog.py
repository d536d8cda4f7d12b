"""Blog listing page object."""

from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from blogpulse.pages.base import BasePage
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)


class BlogPage(BasePage):
    """Interactions with the blog listing page."""

    selectors = {
        "blog_title": 'h1:has-text("Explore the Pointr Blog")',
        "article_cards": 'section[class=blog-posts] div[class^="single_article d-flex"]',
        "article_links": '.single-article--title > span > a[href*="/blog/"]',
        "article_containers": "section[class=blog-posts]",
        "read_more_links": 'a:has-text("Read more")',
    }

    def __init__(self, page: Page, blog_path: str = "/blog", **kwargs: Any) -> None:
        super().__init__(page, **kwargs)
        self._blog_path = blog_path

    async def navigate_to_blog(self) -> None:
        await self.goto(self._blog_path)
        await self.wait_for_page_load()

    async def is_blog_page_loaded(self) -> bool:
        """Check the blog heading is shown and at least one article is listed."""
        try:
            title_exists = await self.is_element_present(self.selectors["blog_title"])
            return title_exists and await self.has_articles()
        except PlaywrightError as e:
            logger.error("Error checking if blog page loaded", error=str(e))
            return False

    async def has_articles(self) -> bool:
        """Check for articles using several selectors, most specific first."""
        for key in ("article_cards", "article_links", "article_containers", "read_more_links"):
            elements = await self.page.query_selector_all(self.selectors[key])
            if elements:
                return True
        return False

    async def get_article_links(self) -> list[str]:
        """Absolute article URLs in page order, without duplicates."""
        await self.wait_for_page_load()
        hrefs = await self.page.eval_on_selector_all(
            self.selectors["article_links"], "elements => elements.map(el => el.href)"
        )
        return list(dict.fromkeys(href for href in hrefs if href))

    async def get_latest_article_links(self, count: int = 3) -> list[str]:
        links = await self.get_article_links()
        return links[:count]

    async def get_article_count(self) -> int:
        return len(await self.get_article_links())

    async def verify_articles_loaded(self, min_count: int = 3) -> bool:
        return await self.get_article_count() >= min_count
