# shapescan/geometry/raster_detector.py

import logging
import time
from typing import List

import numpy as np

from .components import NOISE_FLOOR, find_regions
from .features import region_to_shape
from .primitives import DetectedShape, DetectionResult
from .raster import BINARY_THRESHOLD, binarize, to_grayscale

logger = logging.getLogger(__name__)


def _dimensions(pixels: np.ndarray):
    shape = np.shape(pixels)
    if len(shape) < 2:
        return 0, 0
    return int(shape[1]), int(shape[0])  # width, height


def detect_shapes(
    pixels: np.ndarray,
    *,
    threshold: int = BINARY_THRESHOLD,
    min_pixels: int = NOISE_FLOOR,
) -> DetectionResult:
    """
    Grayscale -> binary -> 4-connected regions -> features -> labels.

    ``pixels`` is an (h, w, 4) RGBA buffer (RGB and single-channel buffers are
    accepted too). Shapes come back in raster discovery order. An empty or
    zero-dimension buffer yields no shapes and a processing time of 0.
    """
    width, height = _dimensions(pixels)
    if width == 0 or height == 0:
        return DetectionResult(shapes=[], processing_time=0.0, image_width=width, image_height=height)

    start = time.perf_counter()

    gray = to_grayscale(pixels)
    binary = binarize(gray, threshold=threshold)
    regions = find_regions(binary, min_pixels=min_pixels)
    shapes: List[DetectedShape] = [region_to_shape(region) for region in regions]

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug(
        "Detected %d shape(s) in %dx%d image (%.2f ms)",
        len(shapes),
        width,
        height,
        elapsed_ms,
    )
    return DetectionResult(
        shapes=shapes,
        processing_time=elapsed_ms,
        image_width=width,
        image_height=height,
    )
