"""Traefik基础镜像构建工具包"""

# 导入loguru并配置logger
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

_handler_id: Optional[int] = None


def setup_logger(level: str = "INFO") -> None:
    """
    配置全局logger

    先添加新的处理器再移除旧的，级别无效时原有配置保持不变。

    Args:
        level: 日志级别

    Raises:
        ValueError: 日志级别无效时抛出
    """
    global _handler_id

    # 添加标准错误处理器
    handler_id = logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        format=LOG_FORMAT,
        colorize=True,
        level=level.upper(),
    )
    if _handler_id is not None:
        logger.remove(_handler_id)
    _handler_id = handler_id


# 移除默认处理器
logger.remove()
setup_logger()

# 导入其他模块
from .cli import app, main

__version__ = "0.1.0"

__all__ = [
    "logger",
    "setup_logger",
    "app",
    "main",
]
