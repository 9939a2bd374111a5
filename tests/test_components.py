import numpy as np

from shapescan.geometry.components import NOISE_FLOOR, find_regions


def _binary(width, height):
    return np.full((height, width), 255, dtype=np.uint8)


def test_no_foreground_yields_no_regions():
    assert find_regions(_binary(30, 20)) == []


def test_noise_floor_boundary():
    assert NOISE_FLOOR == 80

    below = _binary(100, 3)
    below[1, 0:79] = 0
    assert find_regions(below) == []

    at = _binary(100, 3)
    at[1, 0:80] = 0
    regions = find_regions(at)
    assert len(regions) == 1
    assert len(regions[0]) == 80


def test_diagonal_neighbours_are_separate_regions():
    img = _binary(30, 30)
    img[0:9, 0:9] = 0
    img[9:18, 9:18] = 0
    regions = find_regions(img)
    assert len(regions) == 2
    assert all(len(r) == 81 for r in regions)
    assert (0, 0) in regions[0]
    assert (9, 9) in regions[1]


def test_regions_follow_row_major_discovery_order():
    img = _binary(60, 60)
    img[20:30, 2:12] = 0   # lower-left
    img[5:15, 40:50] = 0   # upper-right, scanned first
    regions = find_regions(img)
    assert len(regions) == 2
    assert min(y for _, y in regions[0]) == 5
    assert min(y for _, y in regions[1]) == 20


def test_every_pixel_collected_once():
    img = _binary(40, 40)
    img[5:25, 5:25] = 0
    img[10:15, 10:15] = 255  # hole
    regions = find_regions(img)
    assert len(regions) == 1
    region = regions[0]
    assert len(region) == len(set(region)) == 400 - 25


def test_small_regions_dropped_large_kept():
    img = _binary(50, 50)
    img[0:3, 0:3] = 0
    img[20:30, 20:30] = 0
    regions = find_regions(img)
    assert len(regions) == 1
    assert len(regions[0]) == 100


def test_custom_min_pixels():
    img = _binary(20, 20)
    img[0:3, 0:3] = 0
    assert len(find_regions(img, min_pixels=9)) == 1
    assert find_regions(img, min_pixels=10) == []


def test_large_blob_does_not_recurse():
    img = np.zeros((200, 200), dtype=np.uint8)
    regions = find_regions(img)
    assert len(regions) == 1
    assert len(regions[0]) == 200 * 200


def test_zero_dimension_buffer():
    assert find_regions(np.zeros((0, 5), dtype=np.uint8)) == []
