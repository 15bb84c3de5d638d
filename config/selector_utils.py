# --- config/selector_utils.py ---
"""
选择器工具模块
模型下拉菜单在不同版本的页面中结构不同, 这里按优先级逐个尝试候选选择器
"""

import asyncio
import logging
from typing import Iterator, List, Optional, Tuple

from playwright.async_api import Locator, Page

from config.constants import LOGGER_NAME
from config.timeouts import SELECTOR_VISIBILITY_TIMEOUT_MS

logger = logging.getLogger(LOGGER_NAME)

# 回退选择器的超时上限 (毫秒)
FALLBACK_TIMEOUT_CAP_MS = 2000


def _timeout_schedule(
    selectors: List[str], primary_timeout: int
) -> Iterator[Tuple[int, str, int]]:
    """(序号, 选择器, 超时): 首个选择器用完整超时, 其余用一半且不超过上限。"""
    fallback_timeout = min(FALLBACK_TIMEOUT_CAP_MS, primary_timeout // 2)
    for index, selector in enumerate(selectors, 1):
        yield index, selector, primary_timeout if index == 1 else fallback_timeout


async def find_first_visible_locator(
    page: Page,
    selectors: List[str],
    description: str = "element",
    timeout_per_selector: int = SELECTOR_VISIBILITY_TIMEOUT_MS,
) -> Tuple[Optional[Locator], Optional[str]]:
    """
    返回第一个可见元素的 Locator 及命中的选择器, 全部不可见时返回 (None, None)。

    可见性由 Playwright 的 expect().to_be_visible 主动等待, 不做轮询。
    """
    from playwright.async_api import expect as expect_async

    if not selectors:
        logger.warning(f"[Selector] {description}: 没有提供选择器")
        return None, None

    total = len(selectors)
    for index, selector, timeout in _timeout_schedule(selectors, timeout_per_selector):
        candidate = page.locator(selector).first
        try:
            await expect_async(candidate).to_be_visible(timeout=timeout)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug(
                f"[Selector] {description}: '{selector}' 不可见 "
                f"({index}/{total}, {timeout}ms) - {type(e).__name__}"
            )
            continue
        logger.debug(f"[Selector] {description}: '{selector}' 可见 ({index}/{total})")
        return candidate, selector

    logger.debug(f"[Selector] {description}: {total} 个选择器均未命中")
    return None, None


def build_combined_selector(selectors: List[str]) -> str:
    """合并为一个逗号分隔的 CSS 选择器, 例如 'div[role="menuitem"], [role="option"]'。"""
    return ", ".join(selectors)
