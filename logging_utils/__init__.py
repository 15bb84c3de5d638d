# 日志设置功能
from .core.error_handler import log_error
from .core.logger import (
    BrowserNoiseFilter,
    get_request_id,
    get_source,
    log_context,
    request_context,
    set_request_id,
    set_source,
)
from .core.context import request_id_var, source_var
from .core.rendering import (
    GridFormatter,
    JSONFormatter,
    PlainGridFormatter,
    SemanticHighlighter,
    normalize_source,
)
from .setup import setup_logging

__all__ = [
    "setup_logging",
    # Formatters
    "GridFormatter",
    "PlainGridFormatter",
    "JSONFormatter",
    "SemanticHighlighter",
    "BrowserNoiseFilter",
    # Context managers
    "log_context",
    "request_context",
    # Context variables
    "request_id_var",
    "source_var",
    "normalize_source",
    # Utility functions
    "set_source",
    "set_request_id",
    "get_source",
    "get_request_id",
    # Error handling utilities
    "log_error",
]
