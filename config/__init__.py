# --- config/__init__.py ---
# 配置模块统一导出
from .constants import (
    DROPDOWN_CLOSE_KEY,
    LOGGER_NAME,
    MODEL_FAMILY_NAMES,
    MODEL_FAMILY_PATTERN,
    MORE_OPTIONS_LABEL,
    REASONING_MODE_LABELS,
    REASONING_TOGGLE_FAMILIES,
)
from .selectors import (
    INTERACTIVE_CONTROL_SELECTOR,
    MODEL_BUTTON_SELECTOR,
    MODEL_DROPDOWN_PORTAL_SELECTOR,
    MODEL_DROPDOWN_SELECTORS,
    MODEL_OPTION_SELECTORS,
    REASONING_MENU_ITEM_SELECTOR,
    REASONING_TOGGLE_SELECTOR,
)
from .settings import (
    APP_LOG_FILE_PATH,
    DEBUG_LOGS_ENABLED,
    ENABLE_MODEL_UI_SELECTION,
    ENABLE_REASONING_TOGGLE,
    JSON_LOGS_ENABLED,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_LEVEL,
    get_boolean_env,
    get_environment_variable,
    get_int_env,
)
from .timeouts import (
    CLICK_TIMEOUT_MS,
    MODEL_DROPDOWN_WAIT_TIMEOUT_MS,
    MODEL_MENU_OPEN_SETTLE_MS,
    MODEL_SELECTION_SETTLE_MS,
    MORE_MENU_SETTLE_MS,
    REASONING_TOGGLE_SETTLE_MS,
    SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS,
    SELECTOR_VISIBILITY_TIMEOUT_MS,
)

__all__ = [
    # 常量
    "LOGGER_NAME",
    "MORE_OPTIONS_LABEL",
    "DROPDOWN_CLOSE_KEY",
    "MODEL_FAMILY_NAMES",
    "MODEL_FAMILY_PATTERN",
    "REASONING_TOGGLE_FAMILIES",
    "REASONING_MODE_LABELS",
    # 选择器
    "MODEL_BUTTON_SELECTOR",
    "INTERACTIVE_CONTROL_SELECTOR",
    "MODEL_DROPDOWN_SELECTORS",
    "MODEL_DROPDOWN_PORTAL_SELECTOR",
    "MODEL_OPTION_SELECTORS",
    "REASONING_TOGGLE_SELECTOR",
    "REASONING_MENU_ITEM_SELECTOR",
    # 设置
    "DEBUG_LOGS_ENABLED",
    "JSON_LOGS_ENABLED",
    "LOG_LEVEL",
    "LOG_DIR",
    "APP_LOG_FILE_PATH",
    "LOG_FILE_MAX_BYTES",
    "LOG_FILE_BACKUP_COUNT",
    "ENABLE_MODEL_UI_SELECTION",
    "ENABLE_REASONING_TOGGLE",
    "get_environment_variable",
    "get_boolean_env",
    "get_int_env",
    # 超时
    "CLICK_TIMEOUT_MS",
    "SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS",
    "SELECTOR_VISIBILITY_TIMEOUT_MS",
    "MODEL_DROPDOWN_WAIT_TIMEOUT_MS",
    "MORE_MENU_SETTLE_MS",
    "MODEL_MENU_OPEN_SETTLE_MS",
    "MODEL_SELECTION_SETTLE_MS",
    "REASONING_TOGGLE_SETTLE_MS",
]
