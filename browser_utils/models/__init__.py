# 模型选择入口
from .selection import (
    apply_model_selection,
    is_model_selection_available,
    select_model,
    set_model,
)

__all__ = [
    "apply_model_selection",
    "is_model_selection_available",
    "select_model",
    "set_model",
]
