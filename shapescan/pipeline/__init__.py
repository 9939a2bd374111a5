from .selection import SelectionSet
from .shape_detector import ShapeDetector

__all__ = ["ShapeDetector", "SelectionSet"]
