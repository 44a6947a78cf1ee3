from dataclasses import dataclass
from enum import Enum
from typing import Optional

BASE_DPI = 72
DEFAULT_SIZE = 12.0
DEFAULT_FONT_FAMILY = 'DejaVu Sans Mono'

# printable ascii, control characters skipped
FIRST_CODE = 32
LAST_CODE = 126

# pen positions are 26.6 fixed point
SUBPIXEL = 64
BACKGROUND = 255
INK = 0

floor26 = lambda v: v >> 6
ceil26 = lambda v: (v + SUBPIXEL - 1) >> 6


class ScoreMode(str, Enum):
    SHAPE = 'shape'
    SHADE = 'shade'


@dataclass(frozen=True)
class RenderConfig:
    '''
    desc: options for one conversion, built once and handed to every row task
    params:
        score = how candidate glyphs are compared against the image
        font_path = ttf/otf file, None for the bundled monospace font
        size = font size in points (BASE_DPI, so points == pixels)
        progress = whether rows report pen advance as they go
        trim = strip trailing spaces from each row
        nbsp = replace spaces with no-break spaces
        workers = cap on concurrently running rows, None for one per row
    '''

    score: ScoreMode = ScoreMode.SHAPE
    font_path: Optional[str] = None
    size: float = DEFAULT_SIZE
    progress: bool = False
    trim: bool = False
    nbsp: bool = False
    workers: Optional[int] = None
