"""Fixtures for end-to-end tests against the live blog."""

import os
from collections.abc import AsyncIterator
from pathlib import Path

import pytest

from blogpulse.clients.browser import BrowserClient
from blogpulse.config import Settings


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip live browser tests unless BLOGPULSE_E2E=1."""
    if os.getenv("BLOGPULSE_E2E") == "1":
        return
    skip = pytest.mark.skip(reason="set BLOGPULSE_E2E=1 to run live browser tests")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings from the environment, writing artifacts under tmp_path by default."""
    overrides = {}
    if "BLOGPULSE_RESULTS_DIR" not in os.environ:
        overrides["results_dir"] = str(tmp_path / "test-results")
    if "BLOGPULSE_SCREENSHOTS_DIR" not in os.environ:
        overrides["screenshots_dir"] = str(tmp_path / "screenshots")
    return Settings(**overrides)


@pytest.fixture
async def browser(settings: Settings) -> AsyncIterator[BrowserClient]:
    async with BrowserClient(
        base_url=settings.base_url,
        browser_name=settings.browser_name,
        headless=settings.headless,
        timeout_ms=settings.navigation_timeout_ms,
        block_trackers=settings.block_trackers,
    ) as client:
        yield client
