"""Exception hierarchy for pathutils.

Curve and line geometry never raises; these errors belong to the
surfaces around it (path command conversion, font loading, CLI input).
"""


class PathUtilsError(Exception):
    """Base exception for all pathutils errors."""

    pass


class GeometryError(PathUtilsError):
    """Errors converting between geometry and path representations."""

    pass


class PathCommandError(GeometryError):
    """A path command cannot be represented by the requested primitive."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Unsupported path command '{command}': {reason}")


class InputError(PathUtilsError):
    """Errors in user supplied input."""

    pass


class PointParseError(InputError):
    """Text could not be parsed as a point."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid point '{text}': {reason}")


class FontError(PathUtilsError):
    """Errors related to reading glyph outlines from fonts."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
