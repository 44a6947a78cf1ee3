"""Shared test fixtures."""

import numpy as np
import pytest

from asciize.config import SUBPIXEL, ceil26, floor26
from asciize.font import FontSource, GlyphRender


def checker(height, width):
    pattern = np.indices((height, width)).sum(axis=0) % 2
    return np.where(pattern == 0, 0, 255).astype(np.uint8)


class FakeRasterizer:
    """Glyphs are flat fills (or patterns) spanning the whole advance."""

    def __init__(self, font):
        self.font = font
        self.line_height = font.line_height
        self.rendered = []

    def advance(self, code):
        if code not in self.font.glyphs:
            return 0
        return self.font.advances.get(code, self.font.advance_width)

    def render(self, code, pen):
        self.rendered.append((code, pen))
        new_pen = pen + self.advance(code)
        width = ceil26(new_pen) - floor26(pen) + 1
        fill = self.font.glyphs.get(code, 255)
        if callable(fill):
            pixels = fill(self.line_height, width)
        else:
            pixels = np.full((self.line_height, width), fill, dtype=np.uint8)
        return GlyphRender(code, pen, new_pen, pixels)


class FakeFont:
    def __init__(self, glyphs, line_height=16, advance=8, advances=None):
        self.glyphs = glyphs
        self.line_height = line_height
        self.ascent = line_height
        self.advance_width = advance * SUBPIXEL
        self.advances = advances or {}
        self.opened = 0

    def open(self):
        self.opened += 1
        return FakeRasterizer(self)


@pytest.fixture
def block_font():
    # space is blank, '#' is solid, '-' is light gray, '%' is a checkerboard
    return FakeFont({32: 255, ord('#'): 0, ord('-'): 160, ord('%'): checker})


@pytest.fixture(scope='session')
def real_font():
    return FontSource.load(size=12)


@pytest.fixture
def gray():
    def make(value, width, height):
        pixels = np.full((height, width), value, dtype=np.uint8)
        pixels.flags.writeable = False
        return pixels
    return make
