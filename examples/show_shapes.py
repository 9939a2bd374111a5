import argparse
import logging
import sys
import os

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from shapescan.config import ShapeScanConfig
from shapescan.geometry.visualize import draw_shapes
from shapescan.imaging.loader import load_image
from shapescan.geometry.raster_detector import detect_shapes
from shapescan.render.html import render_results_html


def main():
    parser = argparse.ArgumentParser(description="Detect shapes and render an overlay plus an HTML summary.")
    parser.add_argument("--image", required=True, help="Path to input image")
    parser.add_argument("--out", default="debug_shapes.png", help="Path to save the overlay image")
    parser.add_argument("--html", default=None, help="Optional path to save the HTML summary")
    args = parser.parse_args()

    logging.basicConfig(level=ShapeScanConfig().log_level)

    pixels = load_image(args.image)
    result = detect_shapes(pixels)
    draw_shapes(pixels, result, args.out)
    print("Saved:", args.out)
    for shape_type, count in sorted(result.count_by_type().items()):
        print(f"  {shape_type}: {count}")

    if args.html:
        with open(args.html, "w", encoding="utf-8") as f:
            f.write(render_results_html(result))
        print("Saved:", args.html)


if __name__ == "__main__":
    main()
