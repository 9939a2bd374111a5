# shapescan/samples.py
"""
Synthetic test-image gallery.

Each sample is a white RGBA canvas with dark filled shapes drawn without
anti-aliasing, paired with the labels a human would give it. Those labels
are ground truth for evaluation, not what the heuristic classifier outputs.
"""

import json
import math
import os
from typing import Callable, Dict, List, Tuple

import cv2  # type: ignore
import numpy as np
from PIL import Image

INK = (0, 0, 0, 255)
PAPER = 255


def _canvas(size: int) -> np.ndarray:
    return np.full((size, size, 4), PAPER, dtype=np.uint8)


def _regular_polygon(cx: float, cy: float, radius: float, sides: int, rotation: float = -math.pi / 2) -> np.ndarray:
    pts = [
        (cx + radius * math.cos(rotation + 2 * math.pi * i / sides), cy + radius * math.sin(rotation + 2 * math.pi * i / sides))
        for i in range(sides)
    ]
    return np.round(np.array(pts)).astype(np.int32)


def _star(cx: float, cy: float, outer: float, inner: float, points: int = 5) -> np.ndarray:
    pts = []
    for i in range(points * 2):
        r = outer if i % 2 == 0 else inner
        angle = -math.pi / 2 + math.pi * i / points
        pts.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return np.round(np.array(pts)).astype(np.int32)


def _fill(img: np.ndarray, poly: np.ndarray) -> None:
    cv2.fillPoly(img, [poly.reshape(-1, 1, 2)], INK, lineType=cv2.LINE_8)


def _draw_circle(img, s):
    cv2.circle(img, (s // 2, s // 2), int(s * 0.3), INK, thickness=-1, lineType=cv2.LINE_8)


def _draw_square(img, s):
    a, b = int(s * 0.25), int(s * 0.75)
    cv2.rectangle(img, (a, a), (b, b), INK, thickness=-1)


def _draw_rectangle(img, s):
    cv2.rectangle(img, (int(s * 0.15), int(s * 0.35)), (int(s * 0.85), int(s * 0.65)), INK, thickness=-1)


def _draw_triangle(img, s):
    _fill(img, _regular_polygon(s / 2, s * 0.55, s * 0.35, 3))


def _draw_pentagon(img, s):
    _fill(img, _regular_polygon(s / 2, s / 2, s * 0.35, 5))


def _draw_star(img, s):
    _fill(img, _star(s / 2, s / 2, s * 0.4, s * 0.16))


def _draw_mixed(img, s):
    cv2.circle(img, (int(s * 0.25), int(s * 0.25)), int(s * 0.15), INK, thickness=-1, lineType=cv2.LINE_8)
    cv2.rectangle(img, (int(s * 0.55), int(s * 0.15)), (int(s * 0.9), int(s * 0.3)), INK, thickness=-1)
    _fill(img, _regular_polygon(s / 2, s * 0.72, s * 0.2, 3))


def _draw_noise(img, s):
    # 3x3 specks, each far below the noise floor
    rng = np.random.default_rng(7)
    for _ in range(max(4, s // 10)):
        x, y = (int(v) for v in rng.integers(2, s - 5, size=2))
        img[y:y + 3, x:x + 3] = INK


_SAMPLES: Dict[str, Tuple[Callable[[np.ndarray, int], None], List[str]]] = {
    "circle": (_draw_circle, ["circle"]),
    "square": (_draw_square, ["square"]),
    "rectangle": (_draw_rectangle, ["rectangle"]),
    "triangle": (_draw_triangle, ["triangle"]),
    "pentagon": (_draw_pentagon, ["pentagon"]),
    "star": (_draw_star, ["star"]),
    "mixed": (_draw_mixed, ["circle", "rectangle", "triangle"]),
    "noise": (_draw_noise, []),
}

SAMPLE_NAMES: Tuple[str, ...] = tuple(_SAMPLES)


def make_sample(name: str, size: int = 200) -> np.ndarray:
    """Render one named sample as an (size, size, 4) RGBA buffer."""
    if name not in _SAMPLES:
        raise KeyError(f"Unknown sample image: {name!r}")
    if size < 40:
        raise ValueError("sample size must be at least 40 pixels")
    draw, _ = _SAMPLES[name]
    img = _canvas(size)
    draw(img, size)
    return img


def expected_shapes(name: str) -> List[str]:
    if name not in _SAMPLES:
        raise KeyError(f"Unknown sample image: {name!r}")
    return list(_SAMPLES[name][1])


def gallery(size: int = 200) -> Dict[str, np.ndarray]:
    return {name: make_sample(name, size) for name in SAMPLE_NAMES}


def write_gallery(directory: str, size: int = 200) -> str:
    """
    Write every sample as PNG plus a manifest.json usable by the evaluation runner.
    Returns the manifest path.
    """
    os.makedirs(directory, exist_ok=True)
    entries = []
    for name in SAMPLE_NAMES:
        filename = f"{name}.png"
        Image.fromarray(make_sample(name, size)).save(os.path.join(directory, filename))
        entries.append({"name": name, "path": filename, "expected": expected_shapes(name)})

    manifest_path = os.path.join(directory, "manifest.json")
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump({"images": entries}, f, indent=2)
    return manifest_path
