"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure logging with console and optional file output."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "predictor_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        # Data-quality defects get their own file, apart from outages
        logger.add(
            LOG_DIR / "integrity_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
            level="WARNING",
            filter=lambda record: record["extra"].get("integrity", False),
            rotation="00:00",
            retention="30 days",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
