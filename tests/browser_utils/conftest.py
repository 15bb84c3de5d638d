"""Browser utils test fixtures."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from browser_utils.page_controller_modules.base import BaseController


@pytest.fixture(autouse=True)
def mock_settle():
    """Skip real settle delays so tests never sleep."""
    with patch.object(BaseController, "_settle", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
def mock_expect():
    """Patch playwright's expect as imported lazily by find_first_visible_locator."""
    mock = MagicMock()
    assertion_wrapper = MagicMock()
    assertion_wrapper.to_be_visible = AsyncMock()
    mock.return_value = assertion_wrapper

    with patch("playwright.async_api.expect", mock):
        yield mock
