# shapescan/geometry/features.py

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .primitives import BoundingBox, DetectedShape, Point

CIRCLE_MIN_CIRCULARITY = 0.45
SQUARE_MAX_SIDE_DIFF = 10
RECTANGLE_MIN_ASPECT = 1.2


@dataclass(frozen=True)
class RegionFeatures:
    bounding_box: BoundingBox
    center: Point
    area: int
    pixel_count: int
    circularity: float


def circularity(pixel_count: int, width: int, height: int) -> float:
    """
    Isoperimetric ratio 4*pi*pixels / perimeter**2 against the bounding-box perimeter.

    Returns 0.0 when the perimeter is zero (a single-pixel region).
    """
    perimeter = 2 * (width + height)
    if perimeter <= 0:
        return 0.0
    return (4 * math.pi * pixel_count) / (perimeter * perimeter)


def extract_features(region: Sequence[Tuple[int, int]]) -> RegionFeatures:
    if len(region) == 0:
        raise ValueError("Cannot extract features from an empty region")

    pts = np.asarray(region, dtype=np.int64)
    xs, ys = pts[:, 0], pts[:, 1]
    min_x, max_x = int(xs.min()), int(xs.max())
    min_y, max_y = int(ys.min()), int(ys.max())
    w = max_x - min_x
    h = max_y - min_y

    return RegionFeatures(
        bounding_box=BoundingBox(x=min_x, y=min_y, width=w, height=h),
        center=Point(x=min_x + w / 2, y=min_y + h / 2),
        area=w * h,
        pixel_count=len(region),
        circularity=circularity(len(region), w, h),
    )


def _aspect(a: int, b: int) -> float:
    if b == 0:
        return math.inf if a > 0 else 0.0
    return a / b


def classify_shape(circ: float, width: int, height: int) -> Tuple[str, float]:
    """
    Heuristic label from circularity and bounding-box span.

    Order matters: circle, then near-equal sides (square), then elongated
    (rectangle), otherwise triangle. Never yields "pentagon" or "star".
    Confidence is the circularity clamped to 1 regardless of label.
    """
    if circ >= CIRCLE_MIN_CIRCULARITY:
        shape_type = "circle"
    elif abs(width - height) < SQUARE_MAX_SIDE_DIFF:
        shape_type = "square"
    elif _aspect(width, height) > RECTANGLE_MIN_ASPECT or _aspect(height, width) > RECTANGLE_MIN_ASPECT:
        shape_type = "rectangle"
    else:
        shape_type = "triangle"

    confidence = min(1.0, abs(circ))
    return shape_type, confidence


def region_to_shape(region: Sequence[Tuple[int, int]]) -> DetectedShape:
    feats = extract_features(region)
    bbox = feats.bounding_box
    shape_type, confidence = classify_shape(feats.circularity, bbox.width, bbox.height)
    return DetectedShape(
        shape_type=shape_type,
        confidence=confidence,
        bounding_box=bbox,
        center=feats.center,
        area=feats.area,
    )
