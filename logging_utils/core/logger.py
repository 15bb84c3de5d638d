"""
Core Logger Module
"""

import logging
from contextlib import ExitStack, contextmanager
from contextvars import ContextVar
from typing import Generator, Iterator, Optional

from config.constants import LOGGER_NAME
from logging_utils.core.context import request_id_var, source_var

# =============================================================================
# Logging Filters
# =============================================================================


class BrowserNoiseFilter(logging.Filter):
    """Drops Playwright teardown and navigation noise that says nothing about selection."""

    NOISE_PATTERNS = (
        "AbortError: The operation was aborted",
        "Target page, context or browser has been closed",
        "Cross-Origin Request Blocked",
    )

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(pattern in message for pattern in self.NOISE_PATTERNS)


# =============================================================================
# Context Managers
# =============================================================================


@contextmanager
def _bound(var: ContextVar[str], value: str) -> Iterator[None]:
    token = var.set(value)
    try:
        yield
    finally:
        var.reset(token)


@contextmanager
def log_context(
    name: str,
    logger: Optional[logging.Logger] = None,
    source: Optional[str] = None,
    silent: bool = False,
) -> Generator[None, None, None]:
    """
    Switch the SOURCE column for a block and log ``name`` as its header.

        with log_context("打开模型菜单", logger, source="SELCT"):
            ...
    """
    with ExitStack() as stack:
        if source is not None:
            stack.enter_context(_bound(source_var, source))
        if name and not silent:
            (logger or logging.getLogger(LOGGER_NAME)).info(name)
        yield


@contextmanager
def request_context(
    request_id: str, source: str = "MODEL"
) -> Generator[None, None, None]:
    """Bind request ID and source for every record logged inside one selection request."""
    with _bound(request_id_var, request_id), _bound(source_var, source):
        yield


# =============================================================================
# Convenience Functions
# =============================================================================


def set_source(source: str) -> None:
    source_var.set(source)


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def get_source() -> str:
    return source_var.get()


def get_request_id() -> str:
    return request_id_var.get()
