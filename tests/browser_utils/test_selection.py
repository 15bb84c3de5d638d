"""
Tests for browser_utils/models/selection.py - model selection entry points.

The PageController is replaced by a mock so these tests cover only the
validation -> availability -> selection wiring and the returned outcome.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from browser_utils.models.selection import (
    apply_model_selection,
    is_model_selection_available,
    select_model,
    set_model,
)
from logging_utils import get_request_id, get_source
from models import MODEL_CATALOG, ModelConfig

MODULE = "browser_utils.models.selection"


@pytest.fixture
def controller():
    instance = MagicMock()
    instance.is_model_selection_available = AsyncMock(return_value=True)
    instance.select_model_option = AsyncMock(
        return_value=(True, False, "dropdown-menuitem", False)
    )
    instance.set_model = AsyncMock(return_value=True)
    with patch(f"{MODULE}.PageController", return_value=instance) as mock_cls:
        instance.cls = mock_cls
        yield instance


@pytest.mark.asyncio
async def test_select_model_returns_canonical_name(mock_page, mock_logger, controller):
    result = await select_model(mock_page, "Gemini 3.1 Pro", mock_logger, "req_1")

    assert result == "gemini-3.1-pro"
    target = controller.select_model_option.await_args.args[0]
    assert target == MODEL_CATALOG.get("gemini-3.1-pro")
    controller.cls.assert_called_once_with(mock_page, mock_logger, "req_1")


@pytest.mark.asyncio
async def test_select_model_banned_name_uses_default(mock_page, controller):
    result = await select_model(mock_page, "Sonar")

    assert result == "claude-sonnet-4.6"
    target = controller.select_model_option.await_args.args[0]
    assert target.name == "claude-sonnet-4.6"


@pytest.mark.asyncio
async def test_select_model_unknown_and_empty_use_default(mock_page, controller):
    assert await select_model(mock_page, "gpt-4o-mini") == "claude-sonnet-4.6"
    assert await select_model(mock_page, "") == "claude-sonnet-4.6"
    assert await select_model(mock_page, None) == "claude-sonnet-4.6"


@pytest.mark.asyncio
async def test_fallback_warning_reaches_caller_logger(mock_page, mock_logger, controller):
    with patch("models.validation.logger") as validation_logger:
        outcome = await apply_model_selection(mock_page, "Sonar", mock_logger)

    assert outcome.canonical_name == "claude-sonnet-4.6"
    assert "Sonar" in mock_logger.warning.call_args_list[0][0][0]
    validation_logger.warning.assert_not_called()


@pytest.mark.asyncio
async def test_apply_model_selection_outcome(mock_page, controller):
    controller.select_model_option.return_value = (
        True,
        True,
        "document-text",
        False,
    )

    outcome = await apply_model_selection(mock_page, "claude opus 4.6")

    assert outcome.requested_name == "claude opus 4.6"
    assert outcome.canonical_name == "claude-opus-4.6"
    assert outcome.ui_available is True
    assert outcome.switched is True
    assert outcome.reasoning_enabled is True
    assert outcome.strategy == "document-text"
    assert outcome.already_selected is False


@pytest.mark.asyncio
async def test_apply_model_selection_already_selected(mock_page, controller):
    controller.select_model_option.return_value = (True, False, None, True)

    outcome = await apply_model_selection(mock_page, "grok-4.1")

    assert outcome.switched is True
    assert outcome.already_selected is True
    assert outcome.strategy is None


@pytest.mark.asyncio
async def test_ui_unavailable_returns_validated_name(mock_page, mock_logger, controller):
    controller.is_model_selection_available.return_value = False

    outcome = await apply_model_selection(mock_page, "kimi-k2.5", mock_logger)

    assert outcome.canonical_name == "kimi-k2.5"
    assert outcome.ui_available is False
    assert outcome.switched is False
    controller.select_model_option.assert_not_called()
    assert "kimi-k2.5" in mock_logger.warning.call_args[0][0]


@pytest.mark.asyncio
async def test_switch_failure_is_not_raised(mock_page, mock_logger, controller):
    controller.select_model_option.return_value = (False, False, None, False)

    result = await select_model(mock_page, "gpt-5.2", mock_logger)

    assert result == "gpt-5.2"
    assert "gpt-5.2" in mock_logger.warning.call_args[0][0]


@pytest.mark.asyncio
async def test_ui_selection_disabled(mock_page, mock_logger, controller):
    with patch(f"{MODULE}.ENABLE_MODEL_UI_SELECTION", False):
        outcome = await apply_model_selection(mock_page, "gemini-3-flash", mock_logger)

    assert outcome.canonical_name == "gemini-3-flash"
    assert outcome.ui_available is False
    controller.cls.assert_not_called()


@pytest.mark.asyncio
async def test_request_context_is_set_and_restored(mock_page, controller):
    seen = {}

    async def capture(target):
        seen["req_id"] = get_request_id()
        seen["source"] = get_source()
        return True, False, "button-text", False

    controller.select_model_option.side_effect = capture

    await apply_model_selection(mock_page, "gpt-5.2", req_id="abc1234")

    assert seen == {"req_id": "abc1234", "source": "MODEL"}
    assert get_request_id() == "       "
    assert get_source() == "SYS"


@pytest.mark.asyncio
async def test_cancellation_propagates(mock_page, controller):
    controller.select_model_option.side_effect = asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await select_model(mock_page, "gpt-5.2")


@pytest.mark.asyncio
async def test_is_model_selection_available_delegates(mock_page, controller):
    assert await is_model_selection_available(mock_page) is True
    controller.is_model_selection_available.assert_awaited_once()


# --- set_model ---


@pytest.mark.asyncio
async def test_set_model_resolves_catalog_entry(mock_page, controller):
    assert await set_model(mock_page, "gemini-3.1-pro") is True

    controller.set_model.assert_awaited_once_with(MODEL_CATALOG.get("gemini-3.1-pro"))


@pytest.mark.asyncio
async def test_set_model_falls_back_to_literal_label(mock_page, controller):
    controller.set_model.return_value = False

    assert await set_model(mock_page, "  Mistral Large ") is False

    target = controller.set_model.await_args.args[0]
    assert target == ModelConfig(
        name="mistral large",
        display_name="Mistral Large",
        selector_text="Mistral Large",
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("label", ["", "   ", "Model", "sonar", "модель"])
async def test_set_model_rejects_empty_and_banned(mock_page, mock_logger, controller, label):
    assert await set_model(mock_page, label, mock_logger) is False

    controller.cls.assert_not_called()
    mock_logger.warning.assert_called_once()
