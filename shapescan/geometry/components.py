# shapescan/geometry/components.py

import logging
from typing import List, Tuple

import numpy as np

from .raster import FOREGROUND

logger = logging.getLogger(__name__)

NOISE_FLOOR = 80

Region = List[Tuple[int, int]]

# 4-connectivity: right, left, down, up
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _flood_fill(
    binary: bytes,
    visited: bytearray,
    width: int,
    height: int,
    start_x: int,
    start_y: int,
) -> Region:
    points: Region = []
    stack = [(start_x, start_y)]
    visited[start_y * width + start_x] = 1

    while stack:
        x, y = stack.pop()
        points.append((x, y))
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if nx < 0 or ny < 0 or nx >= width or ny >= height:
                continue
            idx = ny * width + nx
            if not visited[idx] and binary[idx] == FOREGROUND:
                visited[idx] = 1
                stack.append((nx, ny))
    return points


def find_regions(binary: np.ndarray, min_pixels: int = NOISE_FLOOR) -> List[Region]:
    """
    Collect 4-connected regions of foreground pixels in row-major discovery order.

    Regions smaller than ``min_pixels`` are dropped; their pixels stay marked as
    visited so they are never scanned again.
    """
    arr = np.asarray(binary)
    if arr.ndim != 2:
        raise ValueError(f"Expected a single-channel (h, w) buffer, got shape {arr.shape}")
    height, width = arr.shape
    if width == 0 or height == 0:
        return []

    flat = arr.astype(np.uint8).tobytes()
    visited = bytearray(width * height)
    regions: List[Region] = []
    discarded = 0

    # flatnonzero walks indices in row-major order, so discovery order is preserved
    for idx in np.flatnonzero(arr.ravel() == FOREGROUND):
        idx = int(idx)
        if visited[idx]:
            continue
        y, x = divmod(idx, width)
        region = _flood_fill(flat, visited, width, height, x, y)
        if len(region) < min_pixels:
            discarded += 1
            continue
        regions.append(region)

    if discarded:
        logger.debug("Discarded %d region(s) below %d pixels", discarded, min_pixels)
    return regions
