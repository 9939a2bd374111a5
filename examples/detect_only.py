import argparse
import json
import logging
import sys
import os

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from shapescan.config import ShapeScanConfig
from shapescan.errors import ImageLoadError
from shapescan.pipeline.shape_detector import ShapeDetector


def main():
    parser = argparse.ArgumentParser(description="Run the shape detector and print the result JSON.")
    parser.add_argument("--image", required=True, help="Path to an image")
    parser.add_argument("--out", default=None, help="Optional path to save result JSON")
    args = parser.parse_args()

    config = ShapeScanConfig()
    logging.basicConfig(level=config.log_level)
    detector = ShapeDetector(config)

    try:
        result = detector.detect_file(args.image)
    except ImageLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    text = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote detection result to {args.out}")
    else:
        print(text)


if __name__ == "__main__":
    main()
