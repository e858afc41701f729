"""
RouletteSpin - Core Package
===========================

Framework essentials: config, constants, colors, and logging.
"""

from src.core.config import config
from src.core.logger import log

__all__ = ["config", "log"]
