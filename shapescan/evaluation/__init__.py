from .runner import EvaluationReport, ImageEvaluation, evaluate_images
from .schemas import EvaluationManifest, ManifestImage, load_manifest, parse_manifest

__all__ = [
    "EvaluationReport",
    "ImageEvaluation",
    "evaluate_images",
    "EvaluationManifest",
    "ManifestImage",
    "load_manifest",
    "parse_manifest",
]
