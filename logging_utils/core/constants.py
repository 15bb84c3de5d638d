"""
Logging Constants
"""

from typing import Dict

from colorama import Fore, Style
from colorama import init as colorama_init

# Windows 控制台需要 colorama 转换 ANSI 序列
colorama_init(autoreset=False)


# =============================================================================
# Source Codes (fixed 5-letter column)
# =============================================================================

SOURCE_MAP: Dict[str, str] = {
    "sys": "SYS  ",
    "system": "SYS  ",
    "config": "CONFG",
    "page": "PAGE ",
    "browser": "PAGE ",
    "ui": "UI   ",
    # 模型目录 / 校验 / 切换
    "model": "MODEL",
    "catalog": "MODEL",
    "selector": "SELCT",
    "selection": "SELCT",
    "reasoning": "RSNNG",
    "debug": "DEBUG",
}


class Columns:
    """Fixed column widths: TIME LVL SOURCE ID MESSAGE."""

    TIME = 12  # HH:MM:SS.mmm
    LEVEL = 3
    SOURCE = 5
    ID = 7


# =============================================================================
# Colors
# =============================================================================


class Colors:
    RESET = Style.RESET_ALL

    TIME = Style.DIM + Fore.WHITE
    REQUEST_ID = Style.DIM + Fore.WHITE

    LEVELS: Dict[str, str] = {
        "DEBUG": Style.DIM + Fore.CYAN,
        "INFO": Fore.WHITE,
        "WARNING": Fore.YELLOW + Style.BRIGHT,
        "ERROR": Fore.RED + Style.BRIGHT,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    LEVEL_ABBREV: Dict[str, str] = {
        "DEBUG": "DBG",
        "INFO": "INF",
        "WARNING": "WRN",
        "ERROR": "ERR",
        "CRITICAL": "CRT",
    }

    SOURCES: Dict[str, str] = {
        "SYS  ": Style.DIM + Fore.WHITE,
        "CONFG": Style.DIM + Fore.WHITE,
        "PAGE ": Fore.CYAN,
        "UI   ": Fore.LIGHTMAGENTA_EX,
        "MODEL": Fore.LIGHTMAGENTA_EX,
        "SELCT": Fore.LIGHTYELLOW_EX,
        "RSNNG": Fore.LIGHTGREEN_EX,
        "DEBUG": Style.DIM + Fore.CYAN,
    }

    # 消息内容高亮
    TAG = Style.BRIGHT + Fore.WHITE
    STRING = Fore.CYAN
    STRATEGY = Fore.LIGHTBLUE_EX
    BOOLEAN_TRUE = Fore.GREEN
    BOOLEAN_FALSE = Fore.RED
    BOOLEAN_NONE = Style.DIM + Fore.WHITE
    PHRASE_FAILED = Style.BRIGHT + Fore.RED
    PHRASE_SUCCESS = Style.BRIGHT + Fore.GREEN
