"""Configuration management for pathutils.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- IntersectionConfig: Bisection limits and tolerances for intersections
- OutputConfig: Console output settings
- LoggingConfig: Logging settings
- PathUtilsSettings: Main application settings
"""

from pathutils.config.settings import (
    IntersectionConfig,
    LoggingConfig,
    OutputConfig,
    PathUtilsSettings,
    get_default_settings,
)

__all__ = [
    "IntersectionConfig",
    "LoggingConfig",
    "OutputConfig",
    "PathUtilsSettings",
    "get_default_settings",
]
