"""Utility functions for pathutils.

This module provides logging setup and configuration.
"""

from pathutils.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
