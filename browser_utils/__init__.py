# --- browser_utils/__init__.py ---
# 浏览器操作工具模块
from .models import (
    apply_model_selection,
    is_model_selection_available,
    select_model,
    set_model,
)
from .page_controller import PageController
from .page_controller_modules import get_reasoning_selector_for_verification

__all__ = [
    # 页面控制器
    "PageController",
    # 模型选择入口
    "apply_model_selection",
    "select_model",
    "set_model",
    "is_model_selection_available",
    # 推理模式
    "get_reasoning_selector_for_verification",
]
