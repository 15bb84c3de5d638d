"""
主要设置配置模块
包含环境变量配置、日志路径配置、模型选择开关等运行时设置
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# 加载 .env 文件
load_dotenv()


def get_environment_variable(key: str, default: str = "") -> str:
    """获取环境变量值"""
    return os.environ.get(key, default)


def get_boolean_env(key: str, default: bool = False) -> bool:
    """获取布尔型环境变量"""
    value = os.environ.get(key, "").lower()
    if default:
        return value not in ("false", "0", "no", "off")
    else:
        return value in ("true", "1", "yes", "on")


def get_int_env(key: str, default: int = 0) -> int:
    """获取整型环境变量"""
    try:
        return int(os.environ.get(key, str(default)))
    except (ValueError, TypeError):
        return default


# --- 全局日志控制配置 ---
DEBUG_LOGS_ENABLED = get_boolean_env("DEBUG_LOGS_ENABLED", False)
JSON_LOGS_ENABLED = get_boolean_env("JSON_LOGS", False)
LOG_LEVEL = get_environment_variable("LOG_LEVEL", "INFO").upper()

# --- Log Rotation Configuration ---
LOG_FILE_MAX_BYTES = get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024)  # 10MB
LOG_FILE_BACKUP_COUNT = get_int_env("LOG_FILE_BACKUP_COUNT", 5)

# --- 路径配置 (使用 pathlib) ---
_CONFIG_DIR = Path(__file__).parent
_PROJECT_ROOT = _CONFIG_DIR.parent

LOG_DIR = get_environment_variable("LOG_DIR", str(_PROJECT_ROOT / "logs"))
APP_LOG_FILE_PATH = str(Path(LOG_DIR) / "model_selector.log")

# --- 模型选择功能开关 ---
# 关闭后只做模型名校验，不操作页面
ENABLE_MODEL_UI_SELECTION = get_boolean_env("ENABLE_MODEL_UI_SELECTION", True)
ENABLE_REASONING_TOGGLE = get_boolean_env("ENABLE_REASONING_TOGGLE", True)
