# shapescan/imaging/loader.py

import io
import logging
import os
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import ImageLoadError

logger = logging.getLogger(__name__)

ImageSource = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]


def _open(source: ImageSource):
    if isinstance(source, (bytes, bytearray)):
        return Image.open(io.BytesIO(bytes(source)))
    return Image.open(source)


def load_image(source: ImageSource) -> np.ndarray:
    """
    Decode an image into an (h, w, 4) RGBA uint8 buffer.

    ``source`` may be a filesystem path, raw encoded bytes, or a binary
    file-like object. Raises ImageLoadError if it cannot be read or decoded.
    """
    label = source if isinstance(source, (str, os.PathLike)) else type(source).__name__
    try:
        with _open(source) as img:
            rgba = img.convert("RGBA")
            pixels = np.array(rgba, dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageLoadError(f"Cannot load image from {label}: {exc}") from exc

    logger.debug("Loaded %s as %dx%d RGBA", label, pixels.shape[1], pixels.shape[0])
    return pixels


def encode_png(pixels: np.ndarray) -> bytes:
    """Encode an RGBA/RGB/gray buffer as PNG bytes."""
    buf = io.BytesIO()
    Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(buf, format="PNG")
    return buf.getvalue()
