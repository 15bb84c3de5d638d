"""
Rendering Logic for Grid Logger

Layout: TIME LVL SOURCE ID MESSAGE

    22:47:51.690 INF MODEL y74ebn9 [Model] 设置模型: 'Gemini 3.1 Pro'
    22:47:52.701 WRN SELCT y74ebn9 [Selector] 策略 dropdown-menuitem 超时
"""

import json
import logging
import re
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, List, Pattern, Tuple

from .constants import SOURCE_MAP, Colors, Columns
from .context import request_id_var, source_var


def normalize_source(source: str) -> str:
    """Map a free-form source name to its fixed 5-letter code."""
    key = source.strip().lower().replace(" ", "_").replace("-", "_")
    if key in SOURCE_MAP:
        return SOURCE_MAP[key]
    return source[: Columns.SOURCE].upper().ljust(Columns.SOURCE)


def current_context() -> Tuple[str, str]:
    """(request_id, source) bound to the running task."""
    return request_id_var.get(), source_var.get()


def _clock() -> str:
    now = datetime.now()
    return now.strftime("%H:%M:%S.") + f"{now.microsecond // 1000:03d}"


def _paint(text: str, color: str) -> str:
    return f"{color}{text}{Colors.RESET}"


# =============================================================================
# Semantic Highlighter
# =============================================================================


class SemanticHighlighter:
    """Colors quoted model labels, booleans, strategy names and outcome phrases."""

    TAG_PATTERN = re.compile(r"^\[([A-Za-z]{2,10})\]\s*")

    # 按顺序应用, 每个模式只有一个捕获组
    RULES: List[Tuple[Pattern[str], str]] = [
        (re.compile(r"('[^']*'|\"[^\"]*\")"), Colors.STRING),
        (re.compile(r"\b(True)\b"), Colors.BOOLEAN_TRUE),
        (re.compile(r"\b(False)\b"), Colors.BOOLEAN_FALSE),
        (re.compile(r"\b(None)\b"), Colors.BOOLEAN_NONE),
        (
            re.compile(r"\b(dropdown-menuitem|button-text|document-text)\b"),
            Colors.STRATEGY,
        ),
        (
            re.compile(r"(\b(?:Failed|failed|Error|error)\b|失败|出错)"),
            Colors.PHRASE_FAILED,
        ),
        (
            re.compile(r"(\b(?:Success|success|selected|enabled)\b|成功|已选中)"),
            Colors.PHRASE_SUCCESS,
        ),
    ]

    @classmethod
    def highlight(cls, text: str, colorize: bool = True) -> str:
        if not colorize:
            return text

        prefix = ""
        tag_match = cls.TAG_PATTERN.match(text)
        if tag_match:
            tag_name = tag_match.group(1)
            color = Colors.SOURCES.get(normalize_source(tag_name), Colors.TAG)
            prefix = _paint(f"[{tag_name}]", color) + " "
            text = text[tag_match.end() :]

        for pattern, color in cls.RULES:
            text = pattern.sub(lambda m, c=color: _paint(m.group(1), c), text)
        return prefix + text


# =============================================================================
# Grid Formatters
# =============================================================================


class GridFormatter(logging.Formatter):
    """Fixed-width grid formatter, optionally colorized."""

    def __init__(self, colorize: bool = True):
        super().__init__()
        self.colorize = colorize

    def _columns(self, record: logging.LogRecord) -> List[str]:
        req_id, source = current_context()
        source_code = normalize_source(source)
        level = Colors.LEVEL_ABBREV.get(record.levelname, record.levelname[:3].upper())
        req_col = req_id[: Columns.ID].ljust(Columns.ID)
        message = record.getMessage()

        if not self.colorize:
            return [_clock(), level, source_code, req_col, message]
        return [
            _paint(_clock(), Colors.TIME),
            _paint(level, Colors.LEVELS.get(record.levelname, Colors.TAG)),
            _paint(source_code, Colors.SOURCES.get(source_code, Colors.TAG)),
            _paint(req_col, Colors.REQUEST_ID),
            SemanticHighlighter.highlight(message),
        ]

    def format(self, record: logging.LogRecord) -> str:
        # 解释器退出阶段 import 机制已不可用
        if sys.meta_path is None:
            return record.getMessage()

        line = " ".join(self._columns(record))
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class PlainGridFormatter(GridFormatter):
    """Grid layout without ANSI codes, for log files."""

    def __init__(self):
        super().__init__(colorize=False)


# =============================================================================
# JSON Formatter
# =============================================================================


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line (enable with JSON_LOGS=true).

    {"timestamp": "2026-01-15T15:30:00.123Z", "level": "WARNING", "source": "MODEL",
     "message": "...", "request_id": "abc1234", "logger": "PerplexityModelSelector"}
    """

    def format(self, record: logging.LogRecord) -> str:
        req_id, source = current_context()
        now = datetime.now(timezone.utc)

        entry: Dict[str, Any] = {
            "timestamp": now.strftime("%Y-%m-%dT%H:%M:%S.")
            + f"{now.microsecond // 1000:03d}Z",
            "level": record.levelname,
            "source": normalize_source(source).strip(),
            "message": record.getMessage(),
        }
        if req_id.strip():
            entry["request_id"] = req_id.strip()
        if record.name:
            entry["logger"] = record.name

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["exception"] = {
                "type": type(exc).__name__,
                "message": str(exc),
                "traceback": "".join(traceback.format_exception(*record.exc_info)),
            }

        entry["funcName"] = record.funcName
        entry["lineno"] = record.lineno
        entry["pathname"] = record.pathname
        return json.dumps(entry, ensure_ascii=False, default=str)
