"""
PageController模块
封装了模型选择与推理模式开关相关的所有Playwright页面交互逻辑。
"""

import logging

from playwright.async_api import Page as AsyncPage

from browser_utils.page_controller_modules import (
    BaseController,
    ModelSelectionController,
    ReasoningController,
)


class PageController(
    ModelSelectionController,
    ReasoningController,
    BaseController,
):
    """封装了与Perplexity页面模型下拉菜单交互的所有操作。"""

    def __init__(self, page: AsyncPage, logger: logging.Logger, req_id: str):
        super().__init__(page, logger, req_id)
