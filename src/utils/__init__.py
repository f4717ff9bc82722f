"""
Utility modules.
"""

from .logger import get_logger, setup_logger, IndicatorLogger

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "IndicatorLogger",
]
