"""日志配置模块."""

import logging
from typing import Iterable, Optional
from .settings import settings

# openai SDK 依赖 httpx，二者在 INFO 级别会记录每一次推理请求
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
):
    """
    设置日志配置.

    Args:
        level: 日志级别名称，默认使用 settings.log_level
        format_str: 日志格式，默认使用标准格式
        quiet_loggers: 仅在 DEBUG 级别下才输出 INFO 日志的第三方 logger
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    log_format = format_str or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(
        level=log_level, format=log_format, handlers=[logging.StreamHandler()]
    )
    third_party_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """获取指定名称的logger实例."""
    return logging.getLogger(name)
