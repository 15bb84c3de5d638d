import logging
from unittest.mock import MagicMock

from logging_utils import log_error, request_context


def test_log_error_attaches_exception():
    logger = MagicMock()
    error = ValueError("bad selector")

    log_error(logger, "Click failed", error, req_id="req1")

    level, message = logger.log.call_args[0]
    assert level == logging.ERROR
    assert message == "[req1] Click failed"
    exc_type, exc_value, _ = logger.log.call_args.kwargs["exc_info"]
    assert exc_type is ValueError
    assert exc_value is error


def test_log_error_uses_context_request_id():
    logger = MagicMock()
    with request_context("ctx7777"):
        log_error(logger, "oops", level=logging.WARNING)

    logger.log.assert_called_once_with(logging.WARNING, "[ctx7777] oops")


def test_log_error_without_request_id_or_exc_info():
    logger = MagicMock()

    log_error(logger, "plain", ValueError("x"), exc_info=False)

    logger.log.assert_called_once_with(logging.ERROR, "plain")


def test_log_error_does_not_double_prefix():
    logger = MagicMock()

    log_error(logger, "[req1] already tagged", req_id="req1")

    logger.log.assert_called_once_with(logging.ERROR, "[req1] already tagged")
