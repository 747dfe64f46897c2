"""Configuration settings for pathutils."""

from pathlib import Path

from pydantic import BaseModel, Field


class IntersectionConfig(BaseModel):
    """Configuration for the bisection used by primitive intersection.

    The defaults match float32 approximate equality, which is the
    precision every primitive samples at.
    """

    max_iterations: int = Field(
        default=32,
        ge=1,
        le=128,
        description="Maximum bisection steps before giving up on convergence",
    )
    x_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Stop bisecting once the x interval is narrower than this",
    )
    y_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Vertical distance at which two primitives are considered to meet",
    )


class OutputConfig(BaseModel):
    """Console output settings."""

    precision: int = Field(
        default=4,
        ge=0,
        le=9,
        description="Digits after the decimal point when printing coordinates",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathUtilsSettings(BaseModel):
    """Main application settings."""

    intersection: IntersectionConfig = Field(default_factory=IntersectionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathUtilsSettings:
    """Get default application settings."""
    return PathUtilsSettings()
