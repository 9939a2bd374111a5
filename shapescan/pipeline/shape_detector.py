import logging
from typing import Dict, Iterable, Optional

import numpy as np

from ..config import ShapeScanConfig
from ..errors import ImageLoadError
from ..evaluation.runner import EvaluationReport, evaluate_images
from ..evaluation.schemas import EvaluationManifest
from ..geometry.primitives import DetectionResult
from ..geometry.raster_detector import detect_shapes
from ..imaging.loader import ImageSource, load_image
from ..render.html import render_error_html, render_results_html
from ..samples import SAMPLE_NAMES, expected_shapes, make_sample
from .selection import SelectionSet

logger = logging.getLogger(__name__)


class ShapeDetector:
    """
    Entry point for callers that start from files or the sample gallery.

    Holds no per-image state; every call gets its own buffers, so one instance
    can serve independent images.
    """

    def __init__(self, config: Optional[ShapeScanConfig] = None):
        self.config = config or ShapeScanConfig()
        self._gallery: Dict[str, np.ndarray] = {}

    def load_image(self, source: ImageSource) -> np.ndarray:
        return load_image(source)

    def detect_shapes(self, pixels: np.ndarray) -> DetectionResult:
        return detect_shapes(pixels)

    def detect_file(self, source: ImageSource) -> DetectionResult:
        """Load then detect. ImageLoadError propagates before detection starts."""
        return self.detect_shapes(self.load_image(source))

    def process_to_html(self, source: ImageSource) -> str:
        try:
            result = self.detect_file(source)
        except ImageLoadError as exc:
            logger.warning("%s", exc)
            return render_error_html(str(exc))
        return render_results_html(result)

    # Sample gallery

    def gallery_image(self, name: str) -> np.ndarray:
        if name not in self._gallery:
            pixels = make_sample(name, self.config.sample_size)
            pixels.flags.writeable = False
            self._gallery[name] = pixels
        return self._gallery[name]

    def new_selection(self) -> SelectionSet:
        return SelectionSet(SAMPLE_NAMES)

    def evaluate_selection(self, selection: SelectionSet) -> EvaluationReport:
        items = [(name, self.gallery_image(name), expected_shapes(name)) for name in selection.selected]
        return evaluate_images(items, detector=self.detect_shapes)

    def evaluate_manifest(self, manifest: EvaluationManifest, names: Optional[Iterable[str]] = None) -> EvaluationReport:
        wanted = set(names) if names is not None else None
        items = [
            (image.name, image.path, image.expected)
            for image in manifest.images
            if wanted is None or image.name in wanted
        ]
        return evaluate_images(items, loader=self.load_image, detector=self.detect_shapes)
