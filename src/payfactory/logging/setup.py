"""
Loguru sink setup for payfactory.
"""

import sys
from typing import Optional

from loguru import logger

from payfactory.config import config
from payfactory.exceptions import ExceptionCode, SystemException

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | "
    "{name}:{function}:{line} - {message}"
)


def configure_logging(level: Optional[str] = None) -> int:
    """
    Replace every Loguru sink with a single stdout sink.

    Args:
        level: Level name, defaults to the configured logging level

    Returns:
        The Loguru handler id of the stdout sink

    Raises:
        SystemException: If the level is not known to Loguru. The sinks
            installed before the call are left untouched.
    """
    log_level = (level or config.logging.level).upper()

    try:
        logger.level(log_level)
    except ValueError as e:
        raise SystemException(
            message=f"Invalid log level: {log_level}",
            code=ExceptionCode.CONFIGURATION_ERROR,
            details={"level": log_level},
        ) from e

    logger.remove()
    return logger.add(
        sys.stdout,
        level=log_level,
        format=LOG_FORMAT,
        enqueue=config.logging.enqueue,
        backtrace=False,
        diagnose=False,
    )
