"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

PAGE_METHODS = (
    "goto",
    "wait_for_load_state",
    "screenshot",
    "click",
    "wait_for_selector",
    "evaluate",
    "query_selector",
    "query_selector_all",
    "eval_on_selector_all",
    "content",
    "wait_for_timeout",
)


@pytest.fixture
def page() -> MagicMock:
    """Create a mock Playwright page with async methods."""
    mock = MagicMock()
    for name in PAGE_METHODS:
        setattr(mock, name, AsyncMock())
    mock.query_selector.return_value = None
    mock.query_selector_all.return_value = []
    mock.eval_on_selector_all.return_value = []
    mock.content.return_value = ""
    return mock
