"""Font I/O layer for pathutils.

This module bridges path commands and fonttools. It provides a clean
abstraction layer between fonttools pens and the path primitives.

Key responsibilities:
- Replay path commands onto fonttools pens
- Convert pen recordings into path commands and curves
- Read glyph outlines from TTF/OTF fonts

Key classes:
- GlyphOutlineReader: Load fonts and extract glyph outlines
"""

from pathutils.io.pen import commands_from_recording, curves_from_commands, draw_commands
from pathutils.io.reader import GlyphOutlineReader

__all__ = [
    "GlyphOutlineReader",
    "commands_from_recording",
    "curves_from_commands",
    "draw_commands",
]
