"""
Tests for config/selector_utils.py - selector fallback utilities.

These tests verify the fallback logic used to find the model dropdown across
the different UI variants (portal-rendered and inline menus).
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config import MODEL_OPTION_SELECTORS
from config.selector_utils import build_combined_selector, find_first_visible_locator


class TestBuildCombinedSelector:
    """Tests for build_combined_selector function."""

    def test_combine_single_selector(self):
        assert build_combined_selector(["selector1"]) == "selector1"

    def test_combine_multiple_selectors(self):
        """Multiple selectors should be joined with comma-space."""
        assert build_combined_selector(["sel1", "sel2", "sel3"]) == "sel1, sel2, sel3"

    def test_combine_empty_list(self):
        assert build_combined_selector([]) == ""

    def test_combine_option_selectors(self):
        result = build_combined_selector(MODEL_OPTION_SELECTORS)
        for selector in MODEL_OPTION_SELECTORS:
            assert selector in result


class TestFindFirstVisibleLocator:
    """Tests for find_first_visible_locator function."""

    @pytest.mark.asyncio
    async def test_find_first_visible_selector(self):
        """Should return first selector where element is visible."""
        mock_page = MagicMock()
        mock_locator = MagicMock()
        mock_page.locator.return_value = mock_locator

        with patch("playwright.async_api.expect") as mock_expect:
            mock_expect.return_value.to_be_visible = AsyncMock()

            locator, selector = await find_first_visible_locator(
                mock_page, ["sel1", "sel2"], "test element"
            )

        assert locator is mock_locator.first
        assert selector == "sel1"
        mock_page.locator.assert_called_once_with("sel1")

    @pytest.mark.asyncio
    async def test_fallback_to_second_when_first_not_visible(self):
        mock_page = MagicMock()
        mock_locator1 = MagicMock()
        mock_locator2 = MagicMock()
        mock_page.locator.side_effect = [mock_locator1, mock_locator2]

        with patch("playwright.async_api.expect") as mock_expect:
            mock_expect.return_value.to_be_visible = AsyncMock(
                side_effect=[Exception("Timeout"), None]
            )

            locator, selector = await find_first_visible_locator(
                mock_page, ["sel1", "sel2"], "test element", timeout_per_selector=3000
            )

        assert locator is mock_locator2.first
        assert selector == "sel2"
        timeouts = [
            c.kwargs["timeout"]
            for c in mock_expect.return_value.to_be_visible.await_args_list
        ]
        # Fallback selectors get a shorter timeout
        assert timeouts == [3000, 1500]

    @pytest.mark.asyncio
    async def test_fallback_timeout_is_capped(self):
        mock_page = MagicMock()

        with patch("playwright.async_api.expect") as mock_expect:
            mock_expect.return_value.to_be_visible = AsyncMock(
                side_effect=[Exception("Timeout"), None]
            )
            await find_first_visible_locator(
                mock_page, ["sel1", "sel2"], timeout_per_selector=10000
            )

        second_call = mock_expect.return_value.to_be_visible.await_args_list[1]
        assert second_call.kwargs["timeout"] == 2000

    @pytest.mark.asyncio
    async def test_return_none_when_none_visible(self):
        mock_page = MagicMock()

        with patch("playwright.async_api.expect") as mock_expect:
            mock_expect.return_value.to_be_visible = AsyncMock(
                side_effect=Exception("Timeout")
            )

            locator, selector = await find_first_visible_locator(
                mock_page, ["sel1", "sel2", "sel3"], "test element"
            )

        assert locator is None
        assert selector is None
        assert mock_expect.return_value.to_be_visible.await_count == 3

    @pytest.mark.asyncio
    async def test_empty_selector_list(self):
        mock_page = MagicMock()

        with patch("config.selector_utils.logger") as mock_logger:
            locator, selector = await find_first_visible_locator(mock_page, [], "menu")

        assert (locator, selector) == (None, None)
        mock_logger.warning.assert_called_once()
        mock_page.locator.assert_not_called()

    @pytest.mark.asyncio
    async def test_cancelled_error_propagates(self):
        mock_page = MagicMock()

        with patch("playwright.async_api.expect") as mock_expect:
            mock_expect.return_value.to_be_visible = AsyncMock(
                side_effect=asyncio.CancelledError()
            )

            with pytest.raises(asyncio.CancelledError):
                await find_first_visible_locator(mock_page, ["sel1", "sel2"])
