"""Plain-text report rendering for blogpulse."""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from blogpulse import __version__
from blogpulse.models import UNKNOWN_TITLE, UNKNOWN_URL, BatchAnalysisResult, RankedWord
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)

REPORT_TITLE = "Word Frequency Analysis Results"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ReportService:
    """Service for rendering the word frequency report."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def generate_report(
        self, top_words: Sequence[RankedWord], batch: BatchAnalysisResult
    ) -> str:
        """Render the report for an analyzed batch.

        Args:
            top_words: Ranked words to list, usually ``batch.top_words``.
            batch: The analyzed batch; every article in it is listed.

        Returns:
            The report text.
        """
        logger.debug(
            "Rendering report",
            article_count=len(batch.articles),
            top_word_count=len(top_words),
        )

        lines = [
            REPORT_TITLE,
            "=" * len(REPORT_TITLE),
            "",
            f"Analysis Date: {self._clock().isoformat()}",
            f"Articles Analyzed: {len(batch.articles)}",
            "",
            "Articles:",
        ]

        for position, article in enumerate(batch.articles, start=1):
            word_count = article.analysis.total_words if article.analysis else 0
            lines.append(f"{position}. {article.title or UNKNOWN_TITLE}")
            lines.append(f"   URL: {article.url or UNKNOWN_URL}")
            lines.append(f"   Words: {word_count}")
            if article.error:
                lines.append(f"   Error: {article.error}")
            lines.append("")

        heading = f"Top {len(top_words)} Most Repeated Words Across All Articles:"
        lines.append(heading)
        lines.append("=" * len(heading))
        for position, item in enumerate(top_words, start=1):
            lines.append(f'{position}. "{item.word}" - {item.count} occurrences')

        lines.extend(["", "", f"Generated by blogpulse {__version__}", ""])
        return "\n".join(lines)


def generate_report(
    top_words: Sequence[RankedWord],
    batch: BatchAnalysisResult,
    clock: Callable[[], datetime] | None = None,
) -> str:
    """Render a report without keeping a service around."""
    service = ReportService(clock) if clock is not None else ReportService()
    return service.generate_report(top_words, batch)
