import json
import os

import pytest

from shapescan.evaluation.schemas import load_manifest
from shapescan.geometry.raster_detector import detect_shapes
from shapescan.samples import SAMPLE_NAMES, expected_shapes, gallery, make_sample, write_gallery


def test_every_sample_renders():
    images = gallery(120)
    assert list(images) == list(SAMPLE_NAMES)
    for name, pixels in images.items():
        assert pixels.shape == (120, 120, 4), name


def test_unknown_sample_and_tiny_size():
    with pytest.raises(KeyError):
        make_sample("hexagon")
    with pytest.raises(KeyError):
        expected_shapes("hexagon")
    with pytest.raises(ValueError):
        make_sample("circle", size=10)


def test_circle_sample_detected_as_circle():
    result = detect_shapes(make_sample("circle"))
    assert [s.shape_type for s in result.shapes] == ["circle"]


def test_noise_sample_has_nothing_above_floor():
    assert expected_shapes("noise") == []
    assert detect_shapes(make_sample("noise")).shapes == []


def test_mixed_sample_has_three_regions():
    result = detect_shapes(make_sample("mixed"))
    assert len(result.shapes) == 3
    assert result.shapes[0].shape_type == "circle"
    assert len(expected_shapes("mixed")) == 3


def test_write_gallery(tmp_path):
    manifest_path = write_gallery(str(tmp_path), size=80)
    with open(manifest_path, encoding="utf-8") as f:
        data = json.load(f)
    assert [entry["name"] for entry in data["images"]] == list(SAMPLE_NAMES)
    for name in SAMPLE_NAMES:
        assert os.path.exists(tmp_path / f"{name}.png")

    manifest = load_manifest(manifest_path)
    assert manifest.images[0].path == os.path.join(str(tmp_path), "circle.png")
