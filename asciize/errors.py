ERRORS = {
    "bad_score": "Bad scoring mode \"%s\"",
    "bad_workers": "Worker count must be at least 1, got %s",
    "bad_size": "Font size must be positive, got %s",
    "font_open": "Failed to open font %s",
    "font_parse": "Failed to parse font %s",
    "font_default": "Could not find bundled font \"%s\"",
    "image_open": "Failed to open image %s",
    "image_decode": "Failed to decode image %s",
    "rasterize": "Failed to rasterize character %r",
    "no_progress": "No glyph advances the pen at x=%d/64 px",
    "line_done": "Line is already finished",
    "row_assigned": "Row %d was already assigned",
    "row_missing": "Row %d was never assigned",
    "row_failed": "Row %d failed: %s",
}


class AsciizeError(Exception):
    pass


class UsageError(AsciizeError):
    '''bad or missing arguments, exit 64'''
    exit_code = 64


class ResourceError(AsciizeError):
    '''unreadable font or image, exit 66'''
    exit_code = 66


class InternalError(AsciizeError):
    '''unrecoverable failure once rendering has started'''


class NonProgressError(InternalError):
    '''no candidate glyph moves the pen, so the row could never finish'''
