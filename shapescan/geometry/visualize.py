from typing import Optional, Tuple
import os
import cv2  # type: ignore
import numpy as np
from .primitives import DetectionResult


def _shape_color(shape_type: str) -> Tuple[int, int, int]:
    """
    BGR colors for visibility on most images.
    """
    mapping = {
        "circle": (0, 200, 0),        # green
        "square": (200, 120, 0),      # blue-ish
        "rectangle": (0, 0, 220),     # red
        "triangle": (220, 0, 220),    # magenta
        "pentagon": (200, 200, 0),
        "star": (0, 140, 255),
    }
    return mapping.get(shape_type, (0, 220, 220))


def _to_bgr(pixels: np.ndarray) -> np.ndarray:
    arr = np.asarray(pixels, dtype=np.uint8)
    if arr.ndim == 2:
        return cv2.cvtColor(arr, cv2.COLOR_GRAY2BGR)
    if arr.shape[2] == 4:
        return cv2.cvtColor(arr, cv2.COLOR_RGBA2BGR)
    return cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)


def draw_shapes(pixels: np.ndarray, result: DetectionResult, output_path: Optional[str] = None) -> np.ndarray:
    """
    Draw bounding boxes, centers and labels over an RGB(A) buffer.

    Returns the BGR overlay; also writes it to ``output_path`` when given.
    """
    img = _to_bgr(pixels)

    for idx, shape in enumerate(result.shapes):
        x1, y1, x2, y2 = shape.bounding_box.corners()
        color = _shape_color(shape.shape_type)
        cv2.rectangle(img, (x1, y1), (x2, y2), color, 2)
        cx, cy = int(round(shape.center.x)), int(round(shape.center.y))
        cv2.circle(img, (cx, cy), 3, color, -1)
        label = f"{idx}:{shape.shape_type} {shape.confidence * 100:.0f}%"
        cv2.putText(
            img,
            label,
            (x1, max(0, y1 - 6)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            color,
            1,
            lineType=cv2.LINE_AA,
        )

    if output_path:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        if not cv2.imwrite(output_path, img):
            raise ValueError(f"Cannot write overlay image: {output_path}")
    return img
