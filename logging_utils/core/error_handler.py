# -*- coding: utf-8 -*-
"""
Error logging for recovered UI failures.

Selection never raises on a UI failure; the controller logs the failure
here and turns it into a False/None result.
"""

import logging
from typing import Optional

from .context import request_id_var


def _tagged(message: str, req_id: str) -> str:
    req_id = req_id.strip()
    if not req_id or message.startswith(f"[{req_id}]"):
        return message
    return f"[{req_id}] {message}"


def log_error(
    logger: logging.Logger,
    message: str,
    exception: Optional[BaseException] = None,
    *,
    level: int = logging.ERROR,
    req_id: str = "",
    exc_info: bool = True,
) -> None:
    """
    Log ``message`` tagged with the request ID, attaching ``exception``'s traceback.

    ``req_id`` falls back to the request bound by ``request_context``. Pass
    ``level=logging.WARNING`` for failures the caller recovers from.
    """
    message = _tagged(message, req_id or request_id_var.get())

    if exception is None or not exc_info:
        logger.log(level, message)
        return
    logger.log(
        level,
        message,
        exc_info=(type(exception), exception, exception.__traceback__),
    )
