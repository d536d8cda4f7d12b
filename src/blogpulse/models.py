"""Shared data models for blogpulse."""

from dataclasses import dataclass, field

# Word -> count, enumerated in first-seen order.
FrequencyTable = dict[str, int]

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_URL = "Unknown URL"
UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_DATE = "Unknown Date"


@dataclass(frozen=True)
class RankedWord:
    """A word and how many times it occurred."""

    word: str
    count: int


@dataclass
class AnalysisResult:
    """Word statistics for a single text."""

    total_words: int
    unique_words: int
    frequency: FrequencyTable
    top_words: list[RankedWord]


@dataclass
class Document:
    """One article's extracted data.

    When ``error`` is set, extraction failed: ``text`` is empty and the
    document contributes nothing to word counts.
    """

    text: str = ""
    title: str = UNKNOWN_TITLE
    url: str = UNKNOWN_URL
    author: str = UNKNOWN_AUTHOR
    date: str = UNKNOWN_DATE
    index: int = 1
    error: str | None = None
    analysis: AnalysisResult | None = None

    @property
    def failed(self) -> bool:
        """Whether extraction failed for this document."""
        return self.error is not None


@dataclass
class BatchAnalysisResult:
    """Combined word statistics for a batch of documents."""

    articles: list[Document]
    combined_frequency: FrequencyTable
    top_words: list[RankedWord]
    total_articles: int
    failed_articles: list[Document] = field(default_factory=list)
