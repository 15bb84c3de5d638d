"""
Model Selection Entry Points
"""

import logging
from typing import Optional

from playwright.async_api import Page as AsyncPage

from config import ENABLE_MODEL_UI_SELECTION, LOGGER_NAME
from logging_utils import request_context
from models import (
    ModelConfig,
    SelectionOutcome,
    get_model_config,
    get_validated_config,
    is_model_allowed,
)

from ..page_controller import PageController

module_logger = logging.getLogger(LOGGER_NAME)


async def is_model_selection_available(
    page: AsyncPage, logger: Optional[logging.Logger] = None
) -> bool:
    controller = PageController(page, logger or module_logger, "unknown")
    return await controller.is_model_selection_available()


async def apply_model_selection(
    page: AsyncPage,
    requested: Optional[str],
    logger: Optional[logging.Logger] = None,
    req_id: str = "unknown",
) -> SelectionOutcome:
    """
    校验请求的模型名称并尝试在页面上切换到该模型。

    界面切换失败不会抛出异常, 只记录警告; 返回的 canonical_name 始终是
    一个有效且允许使用的目录模型。

    Args:
        page: Playwright 页面实例
        requested: 调用方请求的模型名称 (可为空)
        logger: 可选日志器, 默认使用模块日志器
        req_id: 请求 ID, 写入日志上下文

    Returns:
        SelectionOutcome: 本次选择的完整结果
    """
    log = logger or module_logger
    with request_context(req_id, source="MODEL"):
        target = get_validated_config(requested, log)
        outcome = SelectionOutcome(requested_name=requested, canonical_name=target.name)

        if not ENABLE_MODEL_UI_SELECTION:
            log.info(f"[Model] 界面模型选择已禁用，直接使用: {target.name}")
            return outcome

        controller = PageController(page, log, req_id)
        if not await controller.is_model_selection_available():
            log.warning(f"[Model] 模型选择界面不可用，使用校验后的模型: {target.name}")
            return outcome

        (
            switched,
            reasoning_enabled,
            strategy,
            already_selected,
        ) = await controller.select_model_option(target)
        if not switched:
            log.warning(f"[Model] 无法通过界面设置模型，回退到: {target.name}")

        outcome.ui_available = True
        outcome.switched = switched
        outcome.already_selected = already_selected
        outcome.reasoning_enabled = reasoning_enabled
        outcome.strategy = strategy
        return outcome


async def select_model(
    page: AsyncPage,
    requested: Optional[str],
    logger: Optional[logging.Logger] = None,
    req_id: str = "unknown",
) -> str:
    """Validate the requested model, try to switch the UI to it and return the canonical name."""
    outcome = await apply_model_selection(page, requested, logger=logger, req_id=req_id)
    return outcome.canonical_name


async def set_model(
    page: AsyncPage,
    display_or_name: str,
    logger: Optional[logging.Logger] = None,
    req_id: str = "unknown",
) -> bool:
    """
    直接在页面上选择一个模型标签。

    优先通过目录解析 (名称/显示名称均可), 未命中时按字面标签查找。
    被禁止的通用名称不会被点击。
    """
    log = logger or module_logger
    label = (display_or_name or "").strip()
    if not label:
        log.warning("[Model] 未提供模型名称，跳过界面选择")
        return False

    target = get_model_config(label)
    if target is None:
        log.debug(f"[Model] '{label}' 不在模型目录中，按字面标签查找")
        target = ModelConfig(name=label.lower(), display_name=label, selector_text=label)

    if not is_model_allowed(target.name) or not is_model_allowed(label):
        log.warning(f"[Model] 模型 '{label}' 不允许使用，跳过界面选择")
        return False

    with request_context(req_id, source="MODEL"):
        controller = PageController(page, log, req_id)
        return await controller.set_model(target)
