"""
Logging utility with loguru.
Provides console logging and optional file rotation.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def setup_logger(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """
    Configure loguru logger with console and optional file outputs.

    Args:
        level: Minimum level for the console sink
        log_dir: Directory for the rotating log file (no file sink when empty)
    """
    # Remove default handler
    logger.remove()

    # Console handler with colors
    logger.add(
        sys.stderr,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level.upper(),
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "llm_gateway.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    logger.debug("Logger initialized")
    return logger


def mask_secret(secret: str) -> str:
    """Mask a credential for log output, keeping only its ends."""
    if len(secret) > 12:
        return secret[:8] + "..." + secret[-4:]
    return "***"
