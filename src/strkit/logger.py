"""
Logger setup using loguru.

The package disables its own records on import; call setup_logger() to see them.
"""

import sys
from pathlib import Path

from loguru import logger

from .config import DEFAULT_CONFIG

# 只移除本包添加的 sink，宿主程序自己的 sink 保持不动
_handler_ids: list[int] = []


def setup_logger(
    level: str | None = None,
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Configure loguru sinks and enable strkit records.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (None for console only)
        rotation: Log rotation policy
        retention: Log retention policy
    """
    while _handler_ids:
        logger.remove(_handler_ids.pop())

    level = level or DEFAULT_CONFIG.log_level
    log_file = log_file or DEFAULT_CONFIG.log_file

    _handler_ids.append(logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    ))

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(logger.add(
            str(log_file),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        ))

    logger.enable("strkit")
    logger.debug(f"Logger configured with level: {level}")
