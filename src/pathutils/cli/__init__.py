"""Command-line interface for pathutils.

This module provides the CLI using Typer with rich output for
inspecting curves from the terminal.

Key features:
- Sampling, subdivision and root solving of a single curve
- Inflection points and monotonic parts
- Curve-curve and curve-line intersection
- Listing the curves of a glyph in a font
"""

from pathutils.cli.app import cli, main

__all__ = ["cli", "main"]
