"""Filesystem helpers for screenshots and reports."""

from datetime import UTC, datetime
from pathlib import Path

from blogpulse.utils.logging import get_logger

logger = get_logger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_to_file(path: str | Path, content: str) -> Path:
    """Write UTF-8 text to a file, creating its directory first.

    Returns:
        Path to the written file.
    """
    target = Path(path)
    ensure_directory(target.parent)
    target.write_text(content, encoding="utf-8")
    logger.debug("File written", path=str(target), size=len(content))
    return target


def read_file(path: str | Path) -> str:
    """Read a UTF-8 text file, returning an empty string if it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading file", path=str(path), error=str(e))
        return ""


def file_exists(path: str | Path) -> bool:
    return Path(path).is_file()


def get_timestamp(now: datetime | None = None) -> str:
    """Filename-safe ISO timestamp, e.g. ``2024-01-15T12-00-00-000000+00-00``."""
    now = now or datetime.now(UTC)
    return now.isoformat().replace(":", "-").replace(".", "-")
