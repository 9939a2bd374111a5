from .raster_detector import detect_shapes
from .visualize import draw_shapes
from .primitives import SHAPE_TYPES, BoundingBox, DetectedShape, DetectionResult, Point

__all__ = [
    "detect_shapes",
    "draw_shapes",
    "SHAPE_TYPES",
    "BoundingBox",
    "DetectedShape",
    "DetectionResult",
    "Point",
]
