"""Shared test fixtures."""

import numpy as np
import pytest


def blank(width, height):
    """White, opaque RGBA canvas."""
    return np.full((height, width, 4), 255, dtype=np.uint8)


def fill_rect(img, x, y, w, h, value=0):
    img[y:y + h, x:x + w, :3] = value
    return img


def disk_mask(width, height, cx, cy, r):
    yy, xx = np.mgrid[0:height, 0:width]
    return (xx - cx) ** 2 + (yy - cy) ** 2 <= r * r


@pytest.fixture
def canvas():
    return blank(100, 80)
