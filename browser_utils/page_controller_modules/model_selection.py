import asyncio
import logging
import re
from typing import Awaitable, Callable, List, Optional, Tuple

from playwright.async_api import TimeoutError

from browser_utils.models.dom_scripts import (
    CLICK_CONTROL_BY_TEXT_SCRIPT,
    CLICK_ELEMENT_BY_TEXT_SCRIPT,
    DETECT_MODEL_CONTROL_SCRIPT,
    PROBE_UI_CAPABILITIES_SCRIPT,
)
from config import (
    CLICK_TIMEOUT_MS,
    DROPDOWN_CLOSE_KEY,
    ENABLE_REASONING_TOGGLE,
    INTERACTIVE_CONTROL_SELECTOR,
    MODEL_BUTTON_SELECTOR,
    MODEL_DROPDOWN_PORTAL_SELECTOR,
    MODEL_DROPDOWN_SELECTORS,
    MODEL_DROPDOWN_WAIT_TIMEOUT_MS,
    MODEL_FAMILY_PATTERN,
    MODEL_MENU_OPEN_SETTLE_MS,
    MODEL_OPTION_SELECTORS,
    MODEL_SELECTION_SETTLE_MS,
    MORE_MENU_SETTLE_MS,
    MORE_OPTIONS_LABEL,
    REASONING_MODE_LABELS,
    REASONING_TOGGLE_FAMILIES,
    REASONING_TOGGLE_SELECTOR,
)
from config.selector_utils import build_combined_selector, find_first_visible_locator
from logging_utils import log_error
from models import (
    DetectedModelControl,
    ElementInteractionError,
    ModelConfig,
    ModelOptionNotFoundError,
    UICapabilities,
)

from .reasoning import ReasoningController

_FAMILY_RE = re.compile(MODEL_FAMILY_PATTERN)
_OPTION_SELECTOR = build_combined_selector(MODEL_OPTION_SELECTORS)

# 下拉选项匹配策略, 按顺序尝试, 第一个成功者生效
DROPDOWN_MENUITEM_STRATEGY = "dropdown-menuitem"
BUTTON_TEXT_STRATEGY = "button-text"
DOCUMENT_TEXT_STRATEGY = "document-text"
OPTION_STRATEGY_NAMES: Tuple[str, ...] = (
    DROPDOWN_MENUITEM_STRATEGY,
    BUTTON_TEXT_STRATEGY,
    DOCUMENT_TEXT_STRATEGY,
)

# (switched, reasoning_enabled, strategy, already_selected)
SelectionResult = Tuple[bool, bool, Optional[str], bool]


class ModelSelectionController(ReasoningController):
    """Keeps the in-page model dropdown in sync with a requested catalog entry."""

    async def is_model_selection_available(self) -> bool:
        """扫描所有可交互控件, 存在模型系列名称或 "More" 按钮即视为可用。"""
        try:
            controls = await self.page.query_selector_all(INTERACTIVE_CONTROL_SELECTOR)
            for control in controls:
                text = ((await control.text_content()) or "").strip()
                if text and (text == MORE_OPTIONS_LABEL or _FAMILY_RE.search(text)):
                    self.logger.info(f'[UI] 模型选择控件可用 (找到: "{text}")')
                    return True
            self.logger.warning("[UI] 未找到模型选择控件")
            return False
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[UI] 检查模型选择控件时出错: {e}")
            return False

    async def get_current_model_control(self) -> Optional[DetectedModelControl]:
        try:
            result = await self.page.evaluate(
                DETECT_MODEL_CONTROL_SCRIPT,
                {
                    "modelButtonSelector": MODEL_BUTTON_SELECTOR,
                    "controlSelector": INTERACTIVE_CONTROL_SELECTOR,
                    "familyPattern": MODEL_FAMILY_PATTERN,
                    "moreLabel": MORE_OPTIONS_LABEL,
                },
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[UI] 读取当前模型控件失败: {e}")
            return None

        if not result:
            return None
        return DetectedModelControl(**result)

    async def get_currently_selected_model(self) -> Optional[str]:
        """当前模型控件上显示的文本 ("More" 折叠按钮不算)。"""
        detected = await self.get_current_model_control()
        if detected is None or detected.is_more_affordance:
            return None
        self.logger.debug(f"[UI] 当前模型: '{detected.text}'")
        return detected.text

    async def probe_ui_capabilities(self) -> UICapabilities:
        try:
            result = await self.page.evaluate(
                PROBE_UI_CAPABILITIES_SCRIPT,
                {
                    "controlSelector": INTERACTIVE_CONTROL_SELECTOR,
                    "moreLabel": MORE_OPTIONS_LABEL,
                    "toggleSelector": REASONING_TOGGLE_SELECTOR,
                    "portalSelector": MODEL_DROPDOWN_PORTAL_SELECTOR,
                },
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[UI] 探测界面结构失败: {e}")
            return UICapabilities()

        capabilities = UICapabilities(**result) if isinstance(result, dict) else UICapabilities()
        self.logger.debug(f"[UI] 界面结构: {capabilities.model_dump()}")
        return capabilities

    async def set_model(self, target: ModelConfig) -> bool:
        switched, _, _, _ = await self.select_model_option(target)
        return switched

    async def select_model_option(self, target: ModelConfig) -> SelectionResult:
        """
        在页面上选择目标模型。

        流程: 识别当前控件 -> 已选中则直接返回 -> 探测界面 -> 展开下拉菜单 ->
        按策略顺序查找并点击选项 -> 等待 -> (可选) 开启推理模式 -> 验证 -> 关闭下拉菜单

        所有界面错误都转换为警告并返回 switched=False, 仅 CancelledError 向上传播。
        """
        self.logger.info(f"[Model] 设置模型: '{target.display_name}'")
        opened_menu = False
        try:
            detected = await self.get_current_model_control()
            self.logger.info(
                f"[Model] 当前选择: '{detected.text if detected else '未知'}'"
            )

            if detected is not None and target.display_name in detected.text:
                self.logger.info(f"[Model] 模型 '{target.display_name}' 已选中，无需切换")
                return True, False, None, True

            capabilities = await self.probe_ui_capabilities()
            opened_menu = await self._open_model_menu(detected, capabilities)

            strategy = await self._activate_model_option(target.selector_text)
            if strategy is None:
                raise ModelOptionNotFoundError(
                    target.selector_text,
                    strategies=list(OPTION_STRATEGY_NAMES),
                    req_id=self.req_id,
                )
            self.logger.info(
                f"[Model] 已点击模型选项 '{target.display_name}' (策略: {strategy})"
            )
            await self._settle(MODEL_SELECTION_SETTLE_MS)

            reasoning_enabled = await self._maybe_enable_reasoning(target)
            await self._verify_selection(target)
            return True, reasoning_enabled, strategy, False
        except asyncio.CancelledError:
            raise
        except ModelOptionNotFoundError as e:
            self.logger.warning(f"[Model] {e.message}")
            return False, False, None, False
        except Exception as e:
            log_error(
                self.logger,
                f"[Model] 模型选择失败 '{target.display_name}': {e}",
                e,
                level=logging.WARNING,
                req_id=self.req_id,
            )
            return False, False, None, False
        finally:
            if opened_menu:
                await self._close_model_menu()

    async def _open_model_menu(
        self,
        detected: Optional[DetectedModelControl],
        capabilities: UICapabilities,
    ) -> bool:
        """展开模型下拉菜单。返回本次是否由引擎打开了菜单。"""
        if capabilities.dropdown_is_portal:
            self.logger.debug("[UI] 下拉菜单已打开，跳过展开")
            return False
        if detected is None and not capabilities.has_more_affordance:
            self.logger.debug("[UI] 未识别到可展开的控件")
            return False

        if detected is None or detected.is_more_affordance:
            label, settle_ms = MORE_OPTIONS_LABEL, MORE_MENU_SETTLE_MS
            self.logger.info('[UI] 点击 "More" 展开模型列表...')
        else:
            label, settle_ms = detected.text, MODEL_MENU_OPEN_SETTLE_MS
            self.logger.info(f"[UI] 点击模型控件 '{label}' 打开下拉菜单...")

        try:
            clicked = await self.page.evaluate(
                CLICK_CONTROL_BY_TEXT_SCRIPT,
                {"selector": INTERACTIVE_CONTROL_SELECTOR, "text": label, "exact": True},
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise ElementInteractionError(
                f"Failed to click control '{label}': {e}", req_id=self.req_id
            ) from e
        if not clicked:
            self.logger.warning(f"[UI] 未能点击控件 '{label}'")
            return False
        await self._settle(settle_ms)
        return True

    def _option_strategies(
        self,
    ) -> List[Tuple[str, Callable[[str], Awaitable[bool]]]]:
        return [
            (DROPDOWN_MENUITEM_STRATEGY, self._click_dropdown_menu_item),
            (BUTTON_TEXT_STRATEGY, self._click_button_by_text),
            (DOCUMENT_TEXT_STRATEGY, self._click_element_by_text),
        ]

    async def _activate_model_option(self, selector_text: str) -> Optional[str]:
        for name, strategy in self._option_strategies():
            try:
                if await strategy(selector_text):
                    return name
                self.logger.debug(f"[Selector] 策略 {name} 未找到 '{selector_text}'")
            except asyncio.CancelledError:
                raise
            except TimeoutError:
                self.logger.debug(f"[Selector] 策略 {name} 超时")
            except Exception as e:
                self.logger.warning(f"[Selector] 策略 {name} 出错: {e}")
        return None

    async def _click_dropdown_menu_item(self, selector_text: str) -> bool:
        container, container_selector = await find_first_visible_locator(
            self.page,
            MODEL_DROPDOWN_SELECTORS,
            description="模型下拉菜单",
            timeout_per_selector=MODEL_DROPDOWN_WAIT_TIMEOUT_MS,
        )
        if container is None:
            return False

        option = container.locator(_OPTION_SELECTOR).filter(has_text=selector_text).first
        if await option.count() == 0:
            self.logger.debug(
                f"[Selector] 下拉菜单 '{container_selector}' 中无 '{selector_text}'"
            )
            return False
        await option.click(timeout=CLICK_TIMEOUT_MS)
        return True

    async def _click_button_by_text(self, selector_text: str) -> bool:
        clicked = await self.page.evaluate(
            CLICK_CONTROL_BY_TEXT_SCRIPT,
            {"selector": "button", "text": selector_text, "exact": False},
        )
        return bool(clicked)

    async def _click_element_by_text(self, selector_text: str) -> bool:
        clicked = await self.page.evaluate(
            CLICK_ELEMENT_BY_TEXT_SCRIPT,
            {"text": selector_text, "optionSelector": _OPTION_SELECTOR},
        )
        return bool(clicked)

    async def _maybe_enable_reasoning(self, target: ModelConfig) -> bool:
        if not ENABLE_REASONING_TOGGLE:
            return False
        if (
            target.family not in REASONING_TOGGLE_FAMILIES
            and target.display_name not in REASONING_MODE_LABELS
        ):
            return False

        # 开关只在展开的下拉菜单中渲染, 点击选项后重新探测
        self.logger.info("[Reasoning] 检查推理模式开关...")
        capabilities = await self.probe_ui_capabilities()
        if not capabilities.has_reasoning_toggle:
            self.logger.info("[Reasoning] 未找到推理模式开关，跳过")
            return False
        return await self.enable_reasoning_mode()

    async def _verify_selection(self, target: ModelConfig) -> bool:
        current = await self.get_currently_selected_model()
        if current and target.display_name in current:
            self.logger.info(f"[Model] 验证通过，当前模型: '{current}'")
            return True
        self.logger.warning(
            f"[Model] 无法确认模型切换结果 (当前: '{current or '未知'}')，按已选择处理"
        )
        return False

    async def _close_model_menu(self):
        try:
            if await self.page.query_selector(MODEL_DROPDOWN_PORTAL_SELECTOR) is None:
                return
            await self.page.keyboard.press(DROPDOWN_CLOSE_KEY)
            self.logger.debug("[UI] 已关闭模型下拉菜单")
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.debug(f"[UI] 关闭下拉菜单失败: {e}")
