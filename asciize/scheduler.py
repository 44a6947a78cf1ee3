"""Row bands rendered concurrently, one task per band.

Every task owns its glyph rasterizer and its output cell. The only things
shared are the read-only source image, the output buffer (locked per write)
and the progress queue, which is closed once every task has finished.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from queue import Queue

from .errors import ERRORS, InternalError
from .line import LineRenderer
from .output import OutputBuffer

logger = logging.getLogger(__name__)

_CLOSED = object()


def split_bands(image, line_height):
    '''
    desc: slice the image into full-height row bands, dropping leftover rows
    params:
        image = uint8 array (height x width)
        line_height = band height in pixels
    return: list of read-only views, top to bottom
    '''

    rows = image.shape[0] // line_height
    return [image[y * line_height:(y + 1) * line_height] for y in range(rows)]


class LineJob:
    def __init__(self, bands, font, config):
        self.font = font
        self.config = config
        self.output = OutputBuffer(len(bands))
        self.total = len(bands) * (bands[0].shape[1] << 6) if bands else 0
        self.deltas = Queue()
        self.failures = []
        self._failures_lock = threading.Lock()
        self._drained = False

        workers = config.workers or max(1, len(bands))
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='asciize-row')
        for index, band in enumerate(bands):
            self._executor.submit(self._render_band, index, band)
        self._closer = threading.Thread(target=self._close, name='asciize-closer', daemon=True)
        self._closer.start()

    def _render_band(self, index, band):
        report = self.deltas.put if self.config.progress else None
        try:
            renderer = LineRenderer(band, self.font.open(), self.config.score, report)
            self.output.assign(index, renderer.run())
        except Exception as e:
            with self._failures_lock:
                self.failures.append((index, e))
            return
        logger.debug("row %d done", index)

    def _close(self):
        self._executor.shutdown(wait=True)
        self.deltas.put(_CLOSED)

    def progress(self):
        '''
        desc: merged pen advances from every row, ends once all rows are finished
        return: generator of deltas in 1/64 px
        '''

        if self._drained:
            return
        while True:
            delta = self.deltas.get()
            if delta is _CLOSED:
                self._drained = True
                return
            yield delta

    def result(self):
        for _ in self.progress():
            pass
        self._closer.join()

        if self.failures:
            index, error = min(self.failures, key=lambda failure: failure[0])
            raise InternalError(ERRORS["row_failed"] % (index, error)) from error
        return self.output


class LineScheduler:
    def __init__(self, font, config):
        self.font = font
        self.config = config

    def submit(self, image):
        bands = split_bands(image, self.font.line_height)
        logger.debug("%d rows of %d px", len(bands), self.font.line_height)
        return LineJob(bands, self.font, self.config)

    def run(self, image):
        return self.submit(image).result()
