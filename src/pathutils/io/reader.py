"""Glyph outline reader for TTF/OTF fonts.

This module provides the GlyphOutlineReader class for loading font files
and extracting glyph outlines as path commands and curves.
"""

from pathlib import Path

import structlog
from fontTools.pens.recordingPen import RecordingPen
from fontTools.ttLib import TTFont

from pathutils.core import Curve
from pathutils.domain import PathCommand
from pathutils.exceptions import FontLoadError, GlyphNotFoundError
from pathutils.io.pen import commands_from_recording, curves_from_commands

logger = structlog.get_logger(__name__)


class GlyphOutlineReader:
    """Loads fonts and extracts glyph outlines.

    Example:
        with GlyphOutlineReader(Path("font.ttf")) as reader:
            for curve in reader.get_curves("O"):
                print(curve.inflection_points())
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or cannot be parsed
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        logger.debug("Font loaded", path=str(self._font_path))

    @property
    def glyph_names(self) -> list[str]:
        """Glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return list(self._font.getGlyphOrder())

    def get_commands(self, name: str) -> list[PathCommand]:
        """Get the outline of a glyph as path commands.

        Args:
            name: Name of the glyph

        Returns:
            Path commands in drawing order

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph called ``name``
            PathCommandError: If the outline contains cubic segments
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        if name not in self._font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        pen = RecordingPen()
        self._font.getGlyphSet()[name].draw(pen)
        commands = commands_from_recording(pen.value)

        logger.debug("Glyph outline read", glyph=name, commands=len(commands))
        return commands

    def get_curves(self, name: str) -> list[Curve]:
        """Get the quadratic curves of a glyph outline.

        Args:
            name: Name of the glyph

        Returns:
            Curves in drawing order
        """
        return curves_from_commands(self.get_commands(name))

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "GlyphOutlineReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
