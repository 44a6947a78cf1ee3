import io
import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image as im
from PIL import ImageDraw as imdraw
from PIL import ImageFont as imfont
from matplotlib import font_manager

from .config import BACKGROUND, DEFAULT_FONT_FAMILY, DEFAULT_SIZE, INK, SUBPIXEL, ceil26, floor26
from .errors import ERRORS, InternalError, ResourceError

logger = logging.getLogger(__name__)


def find_default_font():
    '''
    desc: locate the monospace font that ships with matplotlib
    return: absolute path to the font file
    '''

    props = font_manager.FontProperties(family=DEFAULT_FONT_FAMILY)
    try:
        return font_manager.findfont(props, fallback_to_default=False)
    except ValueError as e:
        raise ResourceError(ERRORS["font_default"] % DEFAULT_FONT_FAMILY) from e


@dataclass(frozen=True)
class GlyphRender:
    '''one candidate drawn at a pen position, covering columns floor(pen)..ceil(new_pen)'''

    code: int
    pen: int
    new_pen: int
    pixels: np.ndarray

    @property
    def advance(self):
        return self.new_pen - self.pen

    @property
    def left(self):
        return floor26(self.pen)


class FontSource:
    '''
    desc: font file read and validated once before any row starts; every row
          task opens its own face from the same bytes
    params:
        data = raw font file contents
        size = font size in pixels
        name = path used in error messages
    '''

    def __init__(self, data, size=DEFAULT_SIZE, name='<memory>'):
        self.data = data
        self.size = size
        self.name = name
        try:
            face = self._face()
        except (OSError, ValueError) as e:
            raise ResourceError(ERRORS["font_parse"] % name) from e
        self.ascent, descent = face.getmetrics()
        self.line_height = self.ascent + descent

    @classmethod
    def load(cls, path=None, size=DEFAULT_SIZE):
        if not path:
            path = find_default_font()
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise ResourceError(ERRORS["font_open"] % path) from e

        source = cls(data, size, name=path)
        logger.debug("loaded font %s at size %s, line height %d", path, size, source.line_height)
        return source

    def _face(self):
        return imfont.truetype(io.BytesIO(self.data), size=self.size, encoding='unic')

    def open(self):
        try:
            face = self._face()
        except (OSError, ValueError) as e:
            raise InternalError(ERRORS["font_parse"] % self.name) from e
        return GlyphRasterizer(face, self.ascent, self.line_height)


class GlyphRasterizer:
    '''
    desc: draws single characters at sub-pixel pen positions; not shared between threads
    params:
        face = loaded font face
        ascent = baseline offset from the top of the row
        line_height = height of every rendered bitmap
    '''

    def __init__(self, face, ascent, line_height):
        self.face = face
        self.ascent = ascent
        self.line_height = line_height
        self._advances = {}
        # bitmaps only depend on the fractional part of the pen
        self._bitmaps = {}

    def advance(self, code):
        if code not in self._advances:
            self._advances[code] = round(self.face.getlength(chr(code)) * SUBPIXEL)
        return self._advances[code]

    def render(self, code, pen):
        new_pen = pen + self.advance(code)
        phase = pen & (SUBPIXEL - 1)
        key = (code, phase)
        if key not in self._bitmaps:
            width = ceil26(new_pen) - floor26(pen) + 1
            self._bitmaps[key] = self.rasterize_char(chr(code), phase, width)

        return GlyphRender(code, pen, new_pen, self._bitmaps[key])

    def rasterize_char(self, char, phase, width):
        '''
        desc: rasterize a character on a fresh background-filled canvas
        params:
            char = single-char string
            phase = sub-pixel pen offset inside the first column
            width = canvas width in pixels
        return: raster as read-only uint8 array (line_height x width)
        '''

        canvas = im.new('L', (width, self.line_height), color=BACKGROUND)
        drawn = imdraw.Draw(canvas)
        try:
            drawn.text((phase / SUBPIXEL, self.ascent), char, font=self.face, fill=INK, anchor='ls')
        except (OSError, ValueError) as e:
            raise InternalError(ERRORS["rasterize"] % char) from e

        raster = np.array(canvas, dtype=np.uint8)
        raster.flags.writeable = False
        return raster
