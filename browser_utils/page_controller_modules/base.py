import asyncio

from playwright.async_api import Page as AsyncPage


class BaseController:
    """Base controller providing common functionality."""

    def __init__(self, page: AsyncPage, logger, req_id: str):
        self.page = page
        self.logger = logger
        self.req_id = req_id

    async def _settle(self, delay_ms: int):
        """等待界面动画/渲染完成。"""
        await asyncio.sleep(delay_ms / 1000)
