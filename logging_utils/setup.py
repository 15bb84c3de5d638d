import logging
import logging.handlers
import os
import sys
from typing import Optional

from config import (
    APP_LOG_FILE_PATH,
    DEBUG_LOGS_ENABLED,
    JSON_LOGS_ENABLED,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_LEVEL,
    LOGGER_NAME,
)

from .core.logger import BrowserNoiseFilter
from .core.rendering import GridFormatter, JSONFormatter, PlainGridFormatter


def setup_logging(
    logger_name: str = LOGGER_NAME,
    log_level_name: Optional[str] = None,
    log_to_file: bool = True,
    colorize: bool = True,
) -> logging.Logger:
    """
    设置模型选择器日志系统

    Args:
        logger_name: 日志器名称
        log_level_name: 日志级别名称 (默认读取 LOG_LEVEL, DEBUG_LOGS_ENABLED 时强制 DEBUG)
        log_to_file: 是否写入滚动日志文件
        colorize: 控制台输出是否着色

    Returns:
        logging.Logger: 已配置的日志器
    """
    if log_level_name is None:
        log_level_name = "DEBUG" if DEBUG_LOGS_ENABLED else LOG_LEVEL
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logger_instance = logging.getLogger(logger_name)

    # 清理现有的处理器和过滤器
    if logger_instance.hasHandlers():
        logger_instance.handlers.clear()
    logger_instance.filters.clear()
    logger_instance.setLevel(log_level)
    logger_instance.propagate = False

    # 添加文件处理器
    # JSON_LOGS_ENABLED 时使用 JSONFormatter, 否则使用 PlainGridFormatter
    if log_to_file:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            APP_LOG_FILE_PATH,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            JSONFormatter() if JSON_LOGS_ENABLED else PlainGridFormatter()
        )
        logger_instance.addHandler(file_handler)

    # 添加控制台处理器 (使用 GridFormatter 彩色输出)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(GridFormatter(colorize=colorize))
    console_handler.setLevel(log_level)
    logger_instance.addHandler(console_handler)

    # 过滤 Playwright 导航取消等良性错误
    logger_instance.addFilter(BrowserNoiseFilter())

    # 配置第三方库的日志级别
    logging.getLogger("playwright").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.ERROR)

    logger_instance.debug(f"日志级别设置为: {logging.getLevelName(log_level)}")
    if log_to_file:
        logger_instance.debug(f"日志文件路径: {APP_LOG_FILE_PATH}")

    return logger_instance
