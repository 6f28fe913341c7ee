"""Utility modules for prime_scroll."""

from prime_scroll.utils.config import (
    ScrollConfig,
    load_config,
    save_config,
)
from prime_scroll.utils.logger import setup_logger

__all__ = [
    "ScrollConfig",
    "load_config",
    "save_config",
    "setup_logger",
]
