"""Main workflow orchestrator for blogpulse."""

from dataclasses import dataclass, field
from pathlib import Path

from blogpulse.models import Document, RankedWord
from blogpulse.pages.blog import BlogPage
from blogpulse.services.analyzer import WordAnalyzer
from blogpulse.services.extraction import ArticleExtractor
from blogpulse.services.report import ReportService
from blogpulse.utils.files import get_timestamp, save_to_file
from blogpulse.utils.logging import get_logger, log_step

logger = get_logger(__name__)

STATUS_SUCCESS = "success"
STATUS_PARTIAL = "partial_success"
STATUS_FAILED = "failed"
STATUS_SKIPPED = "skipped"


@dataclass
class OrchestrationResult:
    """Result of the orchestration workflow."""

    status: str
    articles_found: int
    articles_processed: int
    articles_failed: int
    top_words: list[RankedWord] = field(default_factory=list)
    report_path: Path | None = None


def _determine_status(found: int, processed: int, failed: int) -> str:
    if processed == 0 and found > 0:
        return STATUS_FAILED
    if failed > 0:
        return STATUS_PARTIAL
    return STATUS_SUCCESS


class Orchestrator:
    """Orchestrates the blog check and word frequency report."""

    def __init__(
        self,
        blog_page: BlogPage,
        extractor: ArticleExtractor,
        analyzer: WordAnalyzer,
        report_service: ReportService,
        results_dir: str | Path,
        article_count: int = 3,
        min_articles: int = 3,
        top_count: int = 5,
        run_label: str = "",
        screenshots: bool = False,
    ) -> None:
        self._blog = blog_page
        self._extractor = extractor
        self._analyzer = analyzer
        self._report = report_service
        self._results_dir = Path(results_dir)
        self._article_count = article_count
        self._min_articles = min_articles
        self._top_count = top_count
        self._run_label = run_label
        self._screenshots = screenshots

    async def run(self) -> OrchestrationResult:
        """Run the complete workflow.

        Returns:
            OrchestrationResult with statistics about the run.
        """
        logger.info(
            "Starting orchestration",
            article_count=self._article_count,
            min_articles=self._min_articles,
            top_count=self._top_count,
            label=self._run_label,
        )

        log_step("Navigating to blog page")
        await self._blog.navigate_to_blog()
        if self._screenshots:
            await self._blog.take_screenshot(self._labelled("blog-page"))

        if not await self._blog.is_blog_page_loaded():
            log_step("Blog page did not load", "FAIL")
            return OrchestrationResult(
                status=STATUS_FAILED,
                articles_found=0,
                articles_processed=0,
                articles_failed=0,
            )
        log_step("Blog page loaded successfully", "PASS")

        # The minimum applies to every link on the page, not just the latest few.
        found = await self._blog.get_article_count()
        log_step(f"Found {found} article links")

        if found < self._min_articles:
            log_step(
                "Skipping analysis: not enough articles",
                "FAIL",
                found=found,
                min=self._min_articles,
            )
            return OrchestrationResult(
                status=STATUS_SKIPPED,
                articles_found=found,
                articles_processed=0,
                articles_failed=0,
            )

        links = await self._blog.get_latest_article_links(self._article_count)

        # One page is shared, so articles are visited one at a time.
        documents: list[Document] = []
        for index, url in enumerate(links, start=1):
            documents.append(await self._extractor.extract(url, index))

        log_step("Analyzing word frequency across all articles")
        batch = self._analyzer.analyze_multiple_articles(documents, self._top_count)
        for position, item in enumerate(batch.top_words, start=1):
            log_step(f'{position}. "{item.word}": {item.count} occurrences')

        content = self._report.generate_report(batch.top_words, batch)
        report_path = save_to_file(self._report_path(), content)
        log_step(f"Results saved to: {report_path}", "PASS")

        failed = len(batch.failed_articles)
        processed = batch.total_articles - failed
        status = _determine_status(found, processed, failed)

        logger.info(
            "Orchestration complete",
            status=status,
            processed=processed,
            failed=failed,
        )

        return OrchestrationResult(
            status=status,
            articles_found=found,
            articles_processed=processed,
            articles_failed=failed,
            top_words=batch.top_words,
            report_path=report_path,
        )

    def _labelled(self, base: str) -> str:
        return f"{base}-{self._run_label}" if self._run_label else base

    def _report_path(self) -> Path:
        filename = f"{self._labelled('word-frequency-results')}-{get_timestamp()}.txt"
        return self._results_dir / filename
