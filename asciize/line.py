from enum import Enum

from .config import FIRST_CODE, LAST_CODE
from .errors import ERRORS, InternalError, NonProgressError
from .scoring import score_glyph


class LineState(Enum):
    SCANNING = 'scanning'
    DONE = 'done'


class LineRenderer:
    '''
    desc: greedily picks the characters that best cover one row band
    params:
        region = uint8 array (line_height x width), read only
        rasterizer = GlyphRasterizer owned by this row
        mode = ScoreMode
        report = optional callable taking each pen advance in 1/64 px
    '''

    def __init__(self, region, rasterizer, mode, report=None):
        self.region = region
        self.rasterizer = rasterizer
        self.mode = mode
        self.report = report
        self.pen = 0
        self.max_pen = region.shape[1] << 6
        self.chars = []
        self.state = LineState.SCANNING if self.max_pen > 0 else LineState.DONE

    @property
    def result(self):
        return ''.join(self.chars)

    def best_candidate(self):
        best, best_score = None, None
        for code in range(FIRST_CODE, LAST_CODE + 1):
            glyph = self.rasterizer.render(code, self.pen)
            # nothing drawn
            if glyph.advance <= 0:
                continue
            score = score_glyph(self.region, glyph, self.mode)
            if best_score is None or score < best_score:
                best, best_score = glyph, score

        return best

    def step(self):
        if self.state is LineState.DONE:
            raise InternalError(ERRORS["line_done"])

        best = self.best_candidate()
        if best is None:
            raise NonProgressError(ERRORS["no_progress"] % self.pen)

        # a glyph ending on the edge is kept, one past it only if the row is still empty
        if best.new_pen >= self.max_pen:
            if best.new_pen == self.max_pen or not self.chars:
                self.chars.append(chr(best.code))
            self._report(self.max_pen - self.pen)
            self.pen = self.max_pen
            self.state = LineState.DONE
            return self.state

        self.chars.append(chr(best.code))
        self._report(best.advance)
        self.pen = best.new_pen
        return self.state

    def run(self):
        while self.state is LineState.SCANNING:
            self.step()
        return self.result

    def _report(self, delta):
        if self.report is not None:
            self.report(delta)
