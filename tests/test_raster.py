import numpy as np
import pytest

from shapescan.geometry.raster import BINARY_THRESHOLD, binarize, to_grayscale


def test_grayscale_is_rounded_unweighted_mean():
    px = np.array([[[10, 20, 30, 255], [1, 2, 2, 255], [0, 0, 1, 255]]], dtype=np.uint8)
    gray = to_grayscale(px)
    assert gray.shape == (1, 3)
    assert gray.dtype == np.uint8
    assert gray.tolist() == [[20, 2, 0]]


def test_grayscale_ignores_alpha():
    opaque = np.array([[[90, 120, 150, 255]]], dtype=np.uint8)
    clear = np.array([[[90, 120, 150, 0]]], dtype=np.uint8)
    assert to_grayscale(opaque)[0, 0] == to_grayscale(clear)[0, 0] == 120


def test_grayscale_accepts_rgb_and_single_channel():
    rgb = np.full((2, 2, 3), 200, dtype=np.uint8)
    assert to_grayscale(rgb).tolist() == [[200, 200], [200, 200]]

    single = np.array([[5, 250]], dtype=np.uint8)
    out = to_grayscale(single)
    assert out.tolist() == [[5, 250]]
    out[0, 0] = 99
    assert single[0, 0] == 5


def test_grayscale_rejects_two_channel_buffer():
    with pytest.raises(ValueError):
        to_grayscale(np.zeros((2, 2, 2), dtype=np.uint8))


def test_binarize_threshold_is_inclusive_for_foreground():
    gray = np.array([[0, 127, BINARY_THRESHOLD, 129, 255]], dtype=np.uint8)
    assert binarize(gray).tolist() == [[0, 0, 0, 255, 255]]


def test_binarize_custom_threshold_and_purity():
    gray = np.array([[50, 60]], dtype=np.uint8)
    out = binarize(gray, threshold=55)
    assert out.tolist() == [[0, 255]]
    assert gray.tolist() == [[50, 60]]


def test_binarize_requires_single_channel():
    with pytest.raises(ValueError):
        binarize(np.zeros((2, 2, 4), dtype=np.uint8))
