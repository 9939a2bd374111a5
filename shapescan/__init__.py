from .config import ShapeScanConfig
from .errors import ImageLoadError, ManifestError, ShapeScanError
from .geometry import SHAPE_TYPES, BoundingBox, DetectedShape, DetectionResult, Point, detect_shapes
from .imaging import load_image
from .pipeline import SelectionSet, ShapeDetector

__all__ = [
    "ShapeScanConfig",
    "ShapeScanError",
    "ImageLoadError",
    "ManifestError",
    "SHAPE_TYPES",
    "BoundingBox",
    "DetectedShape",
    "DetectionResult",
    "Point",
    "detect_shapes",
    "load_image",
    "SelectionSet",
    "ShapeDetector",
]
