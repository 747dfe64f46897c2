"""Shared fixtures for integration tests."""

import logging
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen


@pytest.fixture
def arch_font(tmp_path: Path) -> Path:
    """Write a minimal TrueType font with one quadratic glyph named 'arch'."""
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((50, 100), (100, 0))
    pen.closePath()
    arch = pen.glyph()
    notdef = TTGlyphPen(None).glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "arch"])
    fb.setupCharacterMap({ord("a"): "arch"})
    fb.setupGlyf({".notdef": notdef, "arch": arch})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "arch": (600, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Arch", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path = tmp_path / "Arch.ttf"
    fb.save(str(path))
    return path


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop logging handlers the CLI callback adds to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
