"""End-to-end tests for the blog listing and the word frequency report."""

import pytest

from blogpulse.clients.browser import BrowserClient
from blogpulse.config import Settings
from blogpulse.main import run_analysis
from blogpulse.pages.blog import BlogPage
from blogpulse.utils.files import file_exists, read_file
from blogpulse.utils.logging import log_step

pytestmark = pytest.mark.e2e

MIN_ARTICLES = 3


async def test_blog_page_loads_with_articles(browser: BrowserClient, settings: Settings) -> None:
    """The blog page shows its heading and at least three articles."""
    blog = BlogPage(
        browser.page,
        blog_path=settings.blog_path,
        screenshots_dir=settings.screenshots_dir,
        element_timeout_ms=settings.element_timeout_ms,
    )

    log_step("Navigating to blog page")
    await blog.navigate_to_blog()
    await blog.take_screenshot(f"blog-page-{browser.browser_name}")

    assert await blog.is_blog_page_loaded() is True
    log_step("Blog page loaded successfully", "PASS")

    article_count = await blog.get_article_count()
    log_step(f"Found {article_count} articles on blog page")
    assert article_count > 0
    assert await blog.verify_articles_loaded(MIN_ARTICLES) is True
    log_step(f"Verified at least {MIN_ARTICLES} articles are loaded", "PASS")


async def test_word_frequency_of_latest_articles(settings: Settings) -> None:
    """The latest three articles yield one to five top words and a saved report."""
    settings = settings.model_copy(update={"article_count": MIN_ARTICLES, "top_count": 5})

    result = await run_analysis(settings)

    assert result.status in ("success", "partial_success")
    assert result.articles_found >= MIN_ARTICLES
    assert 0 < len(result.top_words) <= 5
    assert result.report_path is not None
    assert file_exists(result.report_path)
    report = read_file(result.report_path)
    assert f"Articles Analyzed: {MIN_ARTICLES}" in report
    log_step("Word frequency analysis test completed successfully", "PASS")
