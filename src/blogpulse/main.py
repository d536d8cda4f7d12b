"""Command entry point for blogpulse."""

import asyncio
import sys

from blogpulse import __version__
from blogpulse.clients.browser import BrowserClient
from blogpulse.config import Settings, get_settings
from blogpulse.pages.article import ArticlePage
from blogpulse.pages.blog import BlogPage
from blogpulse.services.analyzer import WordAnalyzer
from blogpulse.services.extraction import ArticleExtractor
from blogpulse.services.orchestrator import (
    STATUS_FAILED,
    STATUS_SKIPPED,
    OrchestrationResult,
    Orchestrator,
)
from blogpulse.services.report import ReportService
from blogpulse.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def run_analysis(settings: Settings) -> OrchestrationResult:
    """Open a browser and run the blog check and word frequency report."""
    async with BrowserClient(
        base_url=settings.base_url,
        browser_name=settings.browser_name,
        headless=settings.headless,
        timeout_ms=settings.navigation_timeout_ms,
        block_trackers=settings.block_trackers,
    ) as browser:
        page_options = {
            "screenshots_dir": settings.screenshots_dir,
            "element_timeout_ms": settings.element_timeout_ms,
        }
        blog_page = BlogPage(browser.page, blog_path=settings.blog_path, **page_options)
        article_page = ArticlePage(browser.page, **page_options)

        orchestrator = Orchestrator(
            blog_page=blog_page,
            extractor=ArticleExtractor(
                article_page,
                min_text_length=settings.min_text_length,
                screenshots=settings.screenshots_enabled,
                screenshot_suffix=browser.browser_name,
            ),
            analyzer=WordAnalyzer(),
            report_service=ReportService(),
            results_dir=settings.results_dir,
            article_count=settings.article_count,
            min_articles=settings.min_articles,
            top_count=settings.top_count,
            run_label=browser.browser_name,
            screenshots=settings.screenshots_enabled,
        )
        return await orchestrator.run()


def main() -> None:
    """Run with settings from the environment; exit non-zero on a failed or skipped run."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("blogpulse starting", version=__version__, blog_url=settings.blog_url)

    result = asyncio.run(run_analysis(settings))

    logger.info(
        "blogpulse finished",
        status=result.status,
        articles_processed=result.articles_processed,
        articles_failed=result.articles_failed,
        report_path=str(result.report_path) if result.report_path else None,
    )
    if result.report_path:
        print(f"Report saved to: {result.report_path}")
    sys.exit(1 if result.status in (STATUS_FAILED, STATUS_SKIPPED) else 0)


if __name__ == "__main__":
    main()
