"""Configuration loading for blogpulse."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
LOG_FORMATS = ("json", "console")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="BLOGPULSE_")

    # Site settings
    base_url: str = Field(
        default="https://www.pointr.tech", description="Root URL of the site under test"
    )
    blog_path: str = Field(default="/blog", description="Path of the blog listing page")

    # Browser settings
    browser_name: str = Field(default="chromium", description="Playwright browser engine")
    headless: bool = Field(default=True, description="Run the browser without a window")
    navigation_timeout_ms: int = Field(
        default=30000, gt=0, description="Default timeout for navigation and actions"
    )
    element_timeout_ms: int = Field(
        default=5000, gt=0, description="Timeout when waiting for a single element"
    )
    block_trackers: bool = Field(
        default=True, description="Abort analytics and ad requests while browsing"
    )

    # Analysis settings
    article_count: int = Field(default=3, ge=1, description="Number of latest articles to analyze")
    min_articles: int = Field(
        default=3, ge=0, description="Minimum article links required on the blog page"
    )
    top_count: int = Field(default=5, ge=0, description="Number of top words in the report")
    min_text_length: int = Field(
        default=100, ge=0, description="Minimum characters of article text to accept"
    )

    # Output settings
    screenshots_enabled: bool = Field(default=True, description="Capture page screenshots")
    screenshots_dir: str = Field(default="screenshots", description="Screenshot directory")
    results_dir: str = Field(default="test-results", description="Report output directory")

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log renderer: json or console")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the site URL is an absolute http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"BLOGPULSE_BASE_URL '{v}' must be an absolute http(s) URL."
            )
        return v.rstrip("/")

    @field_validator("blog_path")
    @classmethod
    def validate_blog_path(cls, v: str) -> str:
        """Validate the blog path is site-relative."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError(f"BLOGPULSE_BLOG_PATH '{v}' must start with '/'.")
        return v

    @field_validator("browser_name")
    @classmethod
    def validate_browser_name(cls, v: str) -> str:
        """Validate the browser engine is one Playwright ships."""
        v = v.strip().lower()
        if v not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"BLOGPULSE_BROWSER_NAME '{v}' is not supported. "
                f"Use one of: {', '.join(SUPPORTED_BROWSERS)}."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the logging level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"BLOGPULSE_LOG_LEVEL '{v}' is not a valid logging level.")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate the log renderer name."""
        v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(
                f"BLOGPULSE_LOG_FORMAT '{v}' must be one of: {', '.join(LOG_FORMATS)}."
            )
        return v

    @model_validator(mode="after")
    def validate_article_counts(self) -> "Settings":
        """Validate enough articles are analyzed to meet the minimum."""
        if self.min_articles > self.article_count:
            raise ValueError(
                f"BLOGPULSE_MIN_ARTICLES ({self.min_articles}) must not exceed "
                f"BLOGPULSE_ARTICLE_COUNT ({self.article_count})."
            )
        return self

    @property
    def blog_url(self) -> str:
        """Absolute URL of the blog listing page."""
        return f"{self.base_url}{self.blog_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
