"""Utility modules for blockfrost_sleuth package."""

from .logging import *

__all__ = [
    "setup_logging",
]
