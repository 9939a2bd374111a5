import pytest

from shapescan.config import ShapeScanConfig
from shapescan.errors import ImageLoadError
from shapescan.imaging.loader import encode_png
from shapescan.pipeline.selection import SelectionSet
from shapescan.pipeline.shape_detector import ShapeDetector
from shapescan.samples import SAMPLE_NAMES

from conftest import blank, fill_rect


@pytest.fixture
def detector():
    return ShapeDetector(ShapeScanConfig(sample_size=100))


def test_detect_file_from_bytes(detector):
    data = encode_png(fill_rect(blank(50, 50), 10, 10, 15, 15))
    result = detector.detect_file(data)
    assert len(result.shapes) == 1
    assert (result.image_width, result.image_height) == (50, 50)


def test_detect_file_load_failure_propagates(detector):
    with pytest.raises(ImageLoadError):
        detector.detect_file(b"garbage")


def test_process_to_html(detector):
    ok = detector.process_to_html(encode_png(blank(20, 20)))
    assert "No shapes detected." in ok
    failed = detector.process_to_html(b"garbage")
    assert failed.startswith("<p>Error:")


def test_gallery_image_is_cached(detector):
    first = detector.gallery_image("circle")
    assert first.shape == (100, 100, 4)
    assert detector.gallery_image("circle") is first


def test_selection_set():
    selection = SelectionSet(["a", "b", "c"])
    assert selection.summary() == "0 images selected"
    assert selection.toggle("c") is True
    assert selection.toggle("a") is True
    assert selection.selected == ["a", "c"]
    assert selection.is_selected("a") and not selection.is_selected("b")
    assert selection.toggle("c") is False
    assert selection.summary() == "1 image selected"
    selection.select_all()
    assert selection.selected == ["a", "b", "c"]
    selection.clear()
    assert selection.selected == []
    with pytest.raises(KeyError):
        selection.toggle("z")


def test_evaluate_selection_in_gallery_order(detector):
    selection = detector.new_selection()
    assert selection.available == list(SAMPLE_NAMES)
    selection.toggle("noise")
    selection.toggle("circle")
    report = detector.evaluate_selection(selection)
    assert [img.name for img in report.images] == ["circle", "noise"]
    noise = report.images[1]
    assert noise.detected == []
    assert noise.precision == 1.0


def test_evaluate_manifest_subset(detector, tmp_path):
    from shapescan.evaluation.schemas import parse_manifest

    good = tmp_path / "good.png"
    good.write_bytes(encode_png(fill_rect(blank(40, 40), 5, 5, 10, 10)))
    manifest = parse_manifest(
        {
            "images": [
                {"name": "good", "path": str(good), "expected": ["square"]},
                {"name": "missing", "path": str(tmp_path / "missing.png"), "expected": ["circle"]},
            ]
        }
    )
    report = detector.evaluate_manifest(manifest)
    assert [img.name for img in report.images] == ["good", "missing"]
    assert report.images[1].error is not None

    only_good = detector.evaluate_manifest(manifest, names=["good"])
    assert [img.name for img in only_good.images] == ["good"]


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("SHAPESCAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHAPESCAN_SAMPLE_SIZE", "64")
    monkeypatch.setenv("SHAPESCAN_OUTPUT_DIR", "/tmp/out")
    config = ShapeScanConfig()
    assert config.log_level == "DEBUG"
    assert config.sample_size == 64
    assert config.output_dir == "/tmp/out"

    assert ShapeScanConfig(sample_size=128).sample_size == 128


def test_config_rejects_bad_sample_size(monkeypatch):
    monkeypatch.setenv("SHAPESCAN_SAMPLE_SIZE", "big")
    with pytest.raises(ValueError):
        ShapeScanConfig()


def test_gallery_image_is_read_only(detector):
    pixels = detector.gallery_image("square")
    with pytest.raises(ValueError):
        pixels[0, 0] = 0
    assert (detector.gallery_image("square")[0, 0] == 255).all()


def test_noise_only_selection_scores_consistently(detector):
    selection = detector.new_selection()
    selection.toggle("noise")
    report = detector.evaluate_selection(selection)
    image = report.images[0]
    assert (report.precision, report.recall, report.f1) == (image.precision, image.recall, image.f1) == (1.0, 1.0, 1.0)
