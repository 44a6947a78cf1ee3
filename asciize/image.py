import logging

import numpy as np
from PIL import Image as im
from PIL import ImageOps as imops

from .errors import ERRORS, ResourceError

logger = logging.getLogger(__name__)


def load_image(path):
    '''
    desc: decode a PNG/JPEG/WEBP file into 8-bit grayscale
    params:
        path = image file path
    return: read-only uint8 array (height x width)
    '''

    try:
        source = im.open(path)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        raise ResourceError(ERRORS["image_open"] % path) from e
    except (OSError, im.DecompressionBombError) as e:
        raise ResourceError(ERRORS["image_decode"] % path) from e

    with source:
        try:
            gray = imops.grayscale(source)
        except (OSError, ValueError, SyntaxError, im.DecompressionBombError) as e:
            raise ResourceError(ERRORS["image_decode"] % path) from e

    pixels = np.array(gray, dtype=np.uint8)
    pixels.flags.writeable = False
    logger.debug("decoded %s: %dx%d", path, pixels.shape[1], pixels.shape[0])
    return pixels
