import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from logging_utils.core.context import request_id_var, source_var


@pytest.fixture(autouse=True)
def reset_log_context():
    """Keep request ID / source context variables from leaking between tests."""
    id_token = request_id_var.set("       ")
    source_token = source_var.set("SYS")
    yield
    request_id_var.reset(id_token)
    source_var.reset(source_token)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def mock_page():
    """Mock Playwright Page object with proper locator setup.

    NOTE: page.locator() is SYNC and returns a Locator object.
    Locator methods like .click(), .count(), .get_attribute() are ASYNC.
    Locator chaining methods like .filter(), .locator() are SYNC.
    """
    page = AsyncMock()
    page.click = AsyncMock()
    page.evaluate = AsyncMock()
    page.query_selector = AsyncMock(return_value=None)
    page.query_selector_all = AsyncMock(return_value=[])
    page.keyboard = MagicMock()
    page.keyboard.press = AsyncMock()

    default_locator = MagicMock()
    # Async action methods
    default_locator.click = AsyncMock()
    default_locator.text_content = AsyncMock()
    default_locator.get_attribute = AsyncMock()
    default_locator.count = AsyncMock(return_value=1)  # Default to element exists
    # Sync chaining methods
    default_locator.locator = MagicMock(return_value=default_locator)
    default_locator.filter = MagicMock(return_value=default_locator)
    # .first and .last properties return the same locator
    default_locator.first = default_locator
    default_locator.last = default_locator

    # page.locator() is SYNC (returns Locator immediately) - use return_value so tests can override
    page.locator = MagicMock(return_value=default_locator)

    return page


@pytest.fixture
def make_element():
    """Factory for ElementHandle stand-ins whose text_content() resolves to the given text."""

    def _make(text):
        element = MagicMock()
        element.text_content = AsyncMock(return_value=text)
        return element

    return _make
