# 模型目录与校验
from .catalog import (
    AVAILABLE_MODELS,
    MODEL_CATALOG,
    ModelCatalog,
    ModelConfig,
    get_default_model,
)

# 异常类
from .exceptions import (
    BannedModelError,
    BrowserError,
    ConfigurationError,
    ElementInteractionError,
    InvalidCatalogError,
    InvalidModelError,
    MissingDefaultModelError,
    ModelError,
    ModelOptionNotFoundError,
    ModelSelectorError,
    SelectionUnavailableError,
)

# 选择结果
from .outcome import DetectedModelControl, SelectionOutcome, UICapabilities
from .policy import (
    BANNED_MODEL_PATTERNS,
    DEFAULT_POLICY,
    BannedNamePolicy,
    BannedPattern,
    is_model_allowed,
)
from .resolution import ModelResolver, get_model_config
from .validation import ModelValidator, get_validated_config, get_validated_model

__all__ = [
    # 目录
    "ModelConfig",
    "ModelCatalog",
    "AVAILABLE_MODELS",
    "MODEL_CATALOG",
    "get_default_model",
    # 策略
    "BannedPattern",
    "BannedNamePolicy",
    "BANNED_MODEL_PATTERNS",
    "DEFAULT_POLICY",
    "is_model_allowed",
    # 解析与校验
    "ModelResolver",
    "get_model_config",
    "ModelValidator",
    "get_validated_model",
    "get_validated_config",
    # 结果
    "UICapabilities",
    "DetectedModelControl",
    "SelectionOutcome",
    # 异常
    "ModelSelectorError",
    "ConfigurationError",
    "MissingDefaultModelError",
    "InvalidCatalogError",
    "ModelError",
    "InvalidModelError",
    "BannedModelError",
    "BrowserError",
    "SelectionUnavailableError",
    "ModelOptionNotFoundError",
    "ElementInteractionError",
]
