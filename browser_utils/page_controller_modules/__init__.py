from .base import BaseController
from .model_selection import ModelSelectionController
from .reasoning import ReasoningController, get_reasoning_selector_for_verification

__all__ = [
    "BaseController",
    "ModelSelectionController",
    "ReasoningController",
    "get_reasoning_selector_for_verification",
]
