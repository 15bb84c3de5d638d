import asyncio

from config import (
    CLICK_TIMEOUT_MS,
    REASONING_MENU_ITEM_SELECTOR,
    REASONING_TOGGLE_SELECTOR,
    REASONING_TOGGLE_SETTLE_MS,
    SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS,
)

from .base import BaseController


class ReasoningController(BaseController):
    """Handles the reasoning mode (Рассуждение) switch inside the open model dropdown."""

    async def is_reasoning_toggle_available(self) -> bool:
        """检查模型下拉菜单中是否存在推理模式开关。"""
        try:
            toggle = await self.page.query_selector(REASONING_TOGGLE_SELECTOR)
            return toggle is not None
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[Reasoning] 检查推理模式开关时出错: {e}")
            return False

    async def is_reasoning_mode_enabled(self) -> bool:
        """读取开关的 aria-checked 状态。开关不存在时视为未开启。"""
        try:
            toggle_locator = self.page.locator(REASONING_TOGGLE_SELECTOR)
            if await toggle_locator.count() == 0:
                return False
            is_checked_str = await toggle_locator.first.get_attribute(
                "aria-checked", timeout=SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS
            )
            return is_checked_str == "true"
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[Reasoning] 读取推理模式状态失败: {e}")
            return False

    async def enable_reasoning_mode(self) -> bool:
        """
        开启推理模式 (仅在模型下拉菜单打开时有效)。

        返回:
            bool: 开关已处于开启状态或点击已发出时为 True, 出错时为 False
        """
        self.logger.info("[Reasoning] 启用推理模式 (Рассуждение)...")
        try:
            if await self.is_reasoning_mode_enabled():
                self.logger.info("[Reasoning] 推理模式已开启，无需操作。")
                return True

            await self.page.locator(REASONING_TOGGLE_SELECTOR).first.click(
                timeout=CLICK_TIMEOUT_MS
            )
            await self._settle(REASONING_TOGGLE_SETTLE_MS)

            if await self.is_reasoning_mode_enabled():
                self.logger.info("[Reasoning] 推理模式已成功开启")
            else:
                self.logger.warning(
                    "[Reasoning] 点击后未能确认推理模式状态 (aria-checked != 'true')"
                )
            return True
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.warning(f"[Reasoning] 开启推理模式失败: {e}")
            return False


def get_reasoning_selector_for_verification() -> str:
    """推理模式菜单项的完整选择器, 用于调试/监控。"""
    return REASONING_MENU_ITEM_SELECTOR
