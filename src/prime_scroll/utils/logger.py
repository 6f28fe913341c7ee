"""Logger setup for the command-line tools."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "prime_scroll",
    log_path: Optional[Path] = None,
    level: str = "INFO",
) -> logging.Logger:
    """Set up logger that writes to console and, optionally, a file.

    Args:
        name: Logger name. Module loggers under this name inherit its handlers.
        log_path: If given, DEBUG and above are also appended to this file.
        level: Console level name.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers when called more than once
    logger.handlers.clear()
    logger.propagate = False

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_format = logging.Formatter('%(message)s')
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    return logger
