# shapescan/geometry/primitives.py

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

# "pentagon" and "star" are part of the vocabulary but the classifier never emits them.
SHAPE_TYPES: Tuple[str, ...] = ("circle", "triangle", "rectangle", "square", "pentagon", "star")


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box. width/height are coordinate spans (max - min), not pixel counts,
    so a single-row region has height 0.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"bounding box values must be non-negative: {self.to_tuple()}")

    def corners(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)  # (x1, y1, x2, y2)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class DetectedShape:
    """
    A single classified region.
    """

    shape_type: str
    confidence: float
    bounding_box: BoundingBox
    center: Point
    area: float  # bounding-box width * height

    def __post_init__(self):
        if self.shape_type not in SHAPE_TYPES:
            raise ValueError(f"Unknown shape type: {self.shape_type!r}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.shape_type,
            "confidence": self.confidence,
            "boundingBox": self.bounding_box.to_dict(),
            "center": self.center.to_dict(),
            "area": self.area,
        }


class DetectionResult:
    """
    All shapes found in one image, in raster discovery order.
    """

    def __init__(
        self,
        shapes: List[DetectedShape],
        processing_time: float,
        image_width: int,
        image_height: int,
    ):
        self.shapes = list(shapes)
        self.processing_time = max(0.0, float(processing_time))  # milliseconds
        self.image_width = int(image_width)
        self.image_height = int(image_height)

    def count_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for shape in self.shapes:
            counts[shape.shape_type] = counts.get(shape.shape_type, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "processingTime": self.processing_time,
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }
