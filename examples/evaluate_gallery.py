# examples/evaluate_gallery.py

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from shapescan.config import ShapeScanConfig
from shapescan.evaluation.runner import EvaluationReport
from shapescan.evaluation.schemas import load_manifest
from shapescan.pipeline.shape_detector import ShapeDetector
from shapescan.render.html import render_evaluation_html
from shapescan.samples import write_gallery


@dataclass
class EvaluationRunResult:
    report: EvaluationReport
    html: str
    json_path: Optional[str]
    html_path: Optional[str]


def run_evaluation(
    *,
    manifest_path: Optional[str] = None,
    names: Optional[List[str]] = None,
    config: Optional[ShapeScanConfig] = None,
    json_path: Optional[str] = "evaluation.json",
    html_path: Optional[str] = "evaluation.html",
) -> EvaluationRunResult:
    """
    Evaluate either a manifest of image files or the built-in sample gallery.

    With no manifest the gallery is evaluated in memory; ``names`` restricts
    the run to a subset (all images when omitted). Output files are only
    written when a path is given.
    """
    config = config or ShapeScanConfig()
    detector = ShapeDetector(config)

    if manifest_path:
        report = detector.evaluate_manifest(load_manifest(manifest_path), names=names)
    else:
        selection = detector.new_selection()
        if names:
            for name in names:
                selection.toggle(name)
        else:
            selection.select_all()
        report = detector.evaluate_selection(selection)

    html = render_evaluation_html(report)

    if json_path:
        with open(json_path, "w", encoding="utf-8") as dest:
            json.dump(report.to_dict(), dest, indent=2)

    if html_path:
        with open(html_path, "w", encoding="utf-8") as dest:
            dest.write(html)

    return EvaluationRunResult(report=report, html=html, json_path=json_path, html_path=html_path)


def main():
    parser = argparse.ArgumentParser(description="Score the shape detector against labelled images.")
    parser.add_argument("--manifest", default=None, help="Manifest JSON (defaults to the built-in gallery)")
    parser.add_argument("--only", nargs="*", default=None, help="Image names to evaluate")
    parser.add_argument("--write-gallery", action="store_true", help="Write the sample gallery + manifest to the output dir and exit")
    parser.add_argument("--out-json", default="evaluation.json", help="Path to save the report JSON")
    parser.add_argument("--out-html", default="evaluation.html", help="Path to save the report HTML")
    args = parser.parse_args()

    config = ShapeScanConfig()
    logging.basicConfig(level=config.log_level)

    if args.write_gallery:
        manifest = write_gallery(config.output_dir, config.sample_size)
        print(f"Wrote gallery manifest: {manifest}")
        return

    result = run_evaluation(
        manifest_path=args.manifest,
        names=args.only,
        config=config,
        json_path=args.out_json,
        html_path=args.out_html,
    )

    report = result.report
    print(f"Images: {len(report.images)} ({len(report.failed)} failed)")
    print(f"Precision: {report.precision:.3f}  Recall: {report.recall:.3f}  F1: {report.f1:.3f}")
    print(f"Wrote report JSON: {result.json_path}")
    print(f"Wrote report HTML: {result.html_path}")


if __name__ == "__main__":
    main()
