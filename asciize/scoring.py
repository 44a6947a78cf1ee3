"""Dissimilarity between a rendered glyph and the image region under it.

Both modes compare the columns from the pen's pixel up to the glyph's right
edge, clipped to the row. Scores are normalized by that column span so narrow
and wide glyphs compete fairly. Lower is better.
"""

import numpy as np

from .config import ScoreMode, ceil26, floor26


def clip_span(glyph, row_width):
    '''
    desc: inclusive pixel columns a glyph is judged over
    params:
        glyph = GlyphRender
        row_width = width of the row in pixels
    return: (left, right) with right capped at row_width
    '''

    left = floor26(glyph.pen)
    right = min(ceil26(glyph.new_pen), row_width)
    return left, right


def score_shape(delta):
    # penalize every pixel that differs
    return int(np.abs(delta).sum())


def score_shade(delta):
    # only overall brightness matters
    return abs(int(delta.sum()))


SCORERS = {
    ScoreMode.SHAPE: score_shape,
    ScoreMode.SHADE: score_shade,
}


def score_glyph(region, glyph, mode):
    '''
    desc: score one candidate against the target region
    params:
        region = uint8 array (line_height x row width) of the source image
        glyph = GlyphRender drawn at the same pen start
        mode = ScoreMode
    return: non-negative int
    '''

    left, right = clip_span(glyph, region.shape[1])
    # the column at row_width is outside the image and contributes nothing
    target = region[:, left:right + 1].astype(np.int64)
    drawn = glyph.pixels[:target.shape[0], :target.shape[1]].astype(np.int64)
    total = SCORERS[ScoreMode(mode)](target - drawn)
    return total // (right - left + 1)
