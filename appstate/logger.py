"""Centralized logging configuration using loguru."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from appstate.settings import load_settings

# Silent unless the application opts in via configure_logging()
logger.disable("appstate")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# Sinks installed by configure_logging(); sinks of the host application are never touched
_handler_ids: List[int] = []


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Enable appstate logging and (re)install its sinks.

    Args:
        level: Minimum level for the console sink (default: APPSTATE_LOG_LEVEL or INFO)
        log_file: Optional path of a rotating DEBUG log file

    Raises:
        ValueError: If ``level`` is not a known loguru level
    """
    level = (level or load_settings().log_level).upper()
    logger.level(level)  # Unknown levels raise before any sink is replaced

    reset_logging()
    _handler_ids.append(
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            logger.add(
                log_path,
                rotation="10 MB",
                retention="10 days",
                level="DEBUG",
                format=FILE_FORMAT,
                enqueue=True,  # Thread-safe logging
            )
        )

    logger.enable("appstate")


def reset_logging() -> None:
    """Remove the sinks added by configure_logging() and silence appstate again."""
    while _handler_ids:
        try:
            logger.remove(_handler_ids.pop())
        except ValueError:
            pass  # Already removed by the host application
    logger.disable("appstate")


def get_logger(name: Optional[str] = None):
    """Get a logger instance with the given name.

    Args:
        name: Module name for the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


__all__ = ["logger", "get_logger", "configure_logging", "reset_logging"]
