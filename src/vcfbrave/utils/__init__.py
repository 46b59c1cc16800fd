"""
Utility modules for vcfbrave.

Provides logging and timing helpers.
"""

from .logging import get_logger, setup_logging, timed

__all__ = [
    "get_logger",
    "setup_logging",
    "timed",
]
