"""Word frequency analysis for extracted articles."""

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from blogpulse.models import (
    AnalysisResult,
    BatchAnalysisResult,
    Document,
    FrequencyTable,
    RankedWord,
)
from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TOP_COUNT = 5
DEFAULT_MIN_WORD_LENGTH = 3

# Common English function words that carry no topical signal.
DEFAULT_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does",
        "did", "will", "would", "could", "should", "may", "might", "must", "can", "this", "that",
        "these", "those", "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us",
        "them", "my", "your", "his", "its", "our", "their", "from", "up", "about", "into",
        "over", "after", "all", "any", "both", "each", "few", "more", "most", "other", "some",
        "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very", "just",
        "now", "here", "there", "when", "where", "why", "how", "what", "which", "who", "whom",
        "whose", "if", "because", "as", "until", "while", "through", "during", "before",
        "above", "below", "between", "among",
    }
)

_PUNCTUATION_RE = re.compile(r"[^\w\s]+")
_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"^\d+$")


class InvalidArgument(ValueError):
    """Raised when a top-N count is negative."""


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgument(f"count must be >= 0, got {count}")


class WordAnalyzer:
    """Counts significant words in article text.

    Tables returned by this class are plain dicts, so they enumerate words in
    the order they were first seen. Ranking relies on that: words with equal
    counts keep first-seen order.
    """

    def __init__(
        self,
        stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
        top_count: int = DEFAULT_TOP_COUNT,
    ) -> None:
        _check_count(top_count)
        self._stop_words = frozenset(stop_words)
        self._min_word_length = min_word_length
        self._top_count = top_count

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def clean_text(self, text: str | None) -> str:
        """Lowercase text and reduce it to word characters separated by single spaces."""
        if not text:
            return ""
        cleaned = _PUNCTUATION_RE.sub(" ", text.lower())
        return _WHITESPACE_RE.sub(" ", cleaned).strip()

    def extract_words(self, text: str | None) -> list[str]:
        """Split text into significant words, keeping order and duplicates.

        Drops words shorter than the minimum length, stop words, pure numbers
        and empty tokens.
        """
        cleaned = self.clean_text(text)
        if not cleaned:
            return []

        return [
            word
            for word in cleaned.split(" ")
            if len(word) >= self._min_word_length
            and word not in self._stop_words
            and not _DIGITS_RE.match(word)
            and word.strip()
        ]

    def count_word_frequency(self, words: Iterable[str]) -> FrequencyTable:
        """Count occurrences of each word."""
        return dict(Counter(words))

    def get_top_words(
        self, frequency: FrequencyTable, count: int = DEFAULT_TOP_COUNT
    ) -> list[RankedWord]:
        """Return the ``count`` most frequent words, highest count first.

        The sort is stable, so ties keep the table's enumeration order.

        Raises:
            InvalidArgument: If count is negative.
        """
        _check_count(count)
        ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
        return [RankedWord(word=word, count=n) for word, n in ranked[:count]]

    def analyze_text(self, text: str | None) -> AnalysisResult:
        """Analyze a single text. Empty or missing text yields a zero result."""
        words = self.extract_words(text)
        frequency = self.count_word_frequency(words)
        return AnalysisResult(
            total_words=len(words),
            unique_words=len(frequency),
            frequency=frequency,
            top_words=self.get_top_words(frequency, self._top_count),
        )

    def combine_frequencies(self, tables: Iterable[FrequencyTable]) -> FrequencyTable:
        """Merge frequency tables by summing counts per word."""
        combined: Counter[str] = Counter()
        for table in tables:
            combined.update(table)
        return dict(combined)

    def analyze_multiple_articles(
        self, documents: Sequence[Document], top_count: int = DEFAULT_TOP_COUNT
    ) -> BatchAnalysisResult:
        """Analyze each document and rank words across the whole batch.

        Each document gets its ``analysis`` attached in place. Documents that
        carry an extraction error are analyzed as empty text so they still show
        up in the batch with zero words.

        Raises:
            InvalidArgument: If top_count is negative.
        """
        _check_count(top_count)

        articles: list[Document] = []
        failed: list[Document] = []
        for document in documents:
            text = "" if document.error is not None else document.text
            document.analysis = self.analyze_text(text)
            articles.append(document)
            if document.error is not None:
                failed.append(document)
                logger.debug(
                    "Document has extraction error, counted as empty",
                    index=document.index,
                    url=document.url,
                    error=document.error,
                )

        combined = self.combine_frequencies(
            doc.analysis.frequency for doc in articles if doc.analysis is not None
        )
        top_words = self.get_top_words(combined, top_count)

        logger.info(
            "Batch analyzed",
            total_articles=len(articles),
            failed_articles=len(failed),
            unique_words=len(combined),
            top_words=[w.word for w in top_words],
        )

        return BatchAnalysisResult(
            articles=articles,
            combined_frequency=combined,
            top_words=top_words,
            total_articles=len(articles),
            failed_articles=failed,
        )
