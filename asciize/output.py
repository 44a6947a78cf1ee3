import threading

from .errors import ERRORS, InternalError

NBSP = '\u00a0'


class OutputBuffer:
    '''
    desc: one cell per row, each written once by the task that rendered it
    params:
        rows = number of row bands
    '''

    def __init__(self, rows):
        self._rows = [None] * rows
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._rows)

    def assign(self, index, line):
        with self._lock:
            if self._rows[index] is not None:
                raise InternalError(ERRORS["row_assigned"] % index)
            self._rows[index] = line

    def lines(self, trim=False, nbsp=False):
        out = []
        for index, line in enumerate(self._rows):
            if line is None:
                raise InternalError(ERRORS["row_missing"] % index)
            if trim:
                line = line.rstrip(' ')
            if nbsp:
                line = line.replace(' ', NBSP)
            out.append(line)
        return out

    def write(self, stream, trim=False, nbsp=False):
        for line in self.lines(trim, nbsp):
            stream.write(line + '\n')
