# shapescan/evaluation/runner.py

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import ImageLoadError
from ..geometry.primitives import DetectionResult
from ..geometry.raster_detector import detect_shapes
from ..imaging.loader import ImageSource, load_image

logger = logging.getLogger(__name__)

# (name, source, expected labels)
EvaluationItem = Tuple[str, ImageSource, Sequence[str]]


def _ratio(num: int, den: int, empty: float) -> float:
    return num / den if den else empty


def _f1(precision: float, recall: float) -> float:
    if precision + recall == 0:
        return 0.0
    return 2 * precision * recall / (precision + recall)


@dataclass
class ImageEvaluation:
    name: str
    expected: List[str]
    detected: List[str] = field(default_factory=list)
    processing_time: float = 0.0
    error: Optional[str] = None

    @property
    def true_positives(self) -> int:
        want = Counter(self.expected)
        got = Counter(self.detected)
        return sum(min(n, got[label]) for label, n in want.items())

    @property
    def precision(self) -> float:
        # nothing expected and nothing found counts as a perfect score
        return _ratio(self.true_positives, len(self.detected), 1.0 if not self.expected else 0.0)

    @property
    def recall(self) -> float:
        return _ratio(self.true_positives, len(self.expected), 1.0 if not self.detected else 0.0)

    @property
    def f1(self) -> float:
        return _f1(self.precision, self.recall)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "expected": list(self.expected),
            "detected": list(self.detected),
            "processingTime": self.processing_time,
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "error": self.error,
        }


@dataclass
class EvaluationReport:
    images: List[ImageEvaluation] = field(default_factory=list)

    @property
    def scored(self) -> List[ImageEvaluation]:
        return [img for img in self.images if img.error is None]

    @property
    def failed(self) -> List[ImageEvaluation]:
        return [img for img in self.images if img.error is not None]

    @property
    def precision(self) -> float:
        tp = sum(img.true_positives for img in self.scored)
        expected_total = sum(len(img.expected) for img in self.scored)
        # same empty-case rule as ImageEvaluation.precision
        return _ratio(tp, sum(len(img.detected) for img in self.scored), 1.0 if expected_total == 0 else 0.0)

    @property
    def recall(self) -> float:
        tp = sum(img.true_positives for img in self.scored)
        detected_total = sum(len(img.detected) for img in self.scored)
        return _ratio(tp, sum(len(img.expected) for img in self.scored), 1.0 if detected_total == 0 else 0.0)

    @property
    def f1(self) -> float:
        return _f1(self.precision, self.recall)

    @property
    def average_time(self) -> float:
        scored = self.scored
        if not scored:
            return 0.0
        return sum(img.processing_time for img in scored) / len(scored)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "images": [img.to_dict() for img in self.images],
            "summary": {
                "total": len(self.images),
                "failed": len(self.failed),
                "precision": self.precision,
                "recall": self.recall,
                "f1": self.f1,
                "averageTime": self.average_time,
            },
        }


def evaluate_images(
    items: Iterable[EvaluationItem],
    *,
    loader: Callable[[ImageSource], np.ndarray] = load_image,
    detector: Callable[[np.ndarray], DetectionResult] = detect_shapes,
) -> EvaluationReport:
    """
    Run detection over each item and score labels against the expected ones.

    A source that fails to load is recorded with its error and the run continues.
    Sources that are already pixel buffers skip the loader.
    """
    report = EvaluationReport()
    for name, source, expected in items:
        entry = ImageEvaluation(name=name, expected=list(expected))
        try:
            pixels = source if isinstance(source, np.ndarray) else loader(source)
        except ImageLoadError as exc:
            logger.warning("Skipping %s: %s", name, exc)
            entry.error = str(exc)
            report.images.append(entry)
            continue

        result = detector(pixels)
        entry.detected = [shape.shape_type for shape in result.shapes]
        entry.processing_time = result.processing_time
        report.images.append(entry)

    logger.debug("Evaluated %d image(s), %d failed", len(report.images), len(report.failed))
    return report
