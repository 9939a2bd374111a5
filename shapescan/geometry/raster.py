# shapescan/geometry/raster.py

import numpy as np

BINARY_THRESHOLD = 128

FOREGROUND = 0
BACKGROUND = 255


def to_grayscale(pixels: np.ndarray) -> np.ndarray:
    """
    Unweighted mean of the R, G, B channels, rounded to the nearest byte.

    Accepts (h, w) buffers (returned as a copy) or (h, w, c) with c >= 3;
    any alpha channel is ignored.
    """
    arr = np.asarray(pixels)
    if arr.ndim == 2:
        return arr.astype(np.uint8, copy=True)
    if arr.ndim != 3 or arr.shape[2] < 3:
        raise ValueError(f"Expected a (h, w) or (h, w, >=3) buffer, got shape {arr.shape}")

    mean = arr[:, :, :3].astype(np.float64).mean(axis=2)
    # np.rint rounds half to even, the same as storing into a clamped byte array
    return np.clip(np.rint(mean), 0, 255).astype(np.uint8)


def binarize(gray: np.ndarray, threshold: int = BINARY_THRESHOLD) -> np.ndarray:
    """0 (foreground/dark) where gray <= threshold, 255 (background) otherwise."""
    arr = np.asarray(gray)
    if arr.ndim != 2:
        raise ValueError(f"Expected a single-channel (h, w) buffer, got shape {arr.shape}")
    return np.where(arr > threshold, BACKGROUND, FOREGROUND).astype(np.uint8)
