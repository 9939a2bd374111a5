"""Pydantic schemas for evaluation manifests."""

import json
import os
from typing import Any, List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..errors import ManifestError
from ..geometry.primitives import SHAPE_TYPES


class ManifestImage(BaseModel):
    name: str = Field(min_length=1)
    path: str = Field(min_length=1)
    expected: List[str] = Field(default_factory=list)

    @field_validator("expected")
    @classmethod
    def known_shape_types(cls, value: List[str]) -> List[str]:
        unknown = sorted(set(value) - set(SHAPE_TYPES))
        if unknown:
            raise ValueError(f"unknown shape type(s): {', '.join(unknown)}")
        return value


class EvaluationManifest(BaseModel):
    images: List[ManifestImage]

    @model_validator(mode="after")
    def unique_names(self) -> "EvaluationManifest":
        seen = set()
        for image in self.images:
            if image.name in seen:
                raise ValueError(f"duplicate image name: {image.name}")
            seen.add(image.name)
        return self

    def resolve_paths(self, base_dir: str) -> "EvaluationManifest":
        """Return a copy with relative image paths anchored at ``base_dir``."""
        images = [
            image.model_copy(update={"path": image.path if os.path.isabs(image.path) else os.path.join(base_dir, image.path)})
            for image in self.images
        ]
        return EvaluationManifest(images=images)


def parse_manifest(payload: Union[str, bytes, dict]) -> EvaluationManifest:
    try:
        data: Any = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        return EvaluationManifest.model_validate(data)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise ManifestError(f"Manifest does not match schema: {exc}") from exc


def load_manifest(path: str) -> EvaluationManifest:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    return parse_manifest(raw).resolve_paths(os.path.dirname(os.path.abspath(path)))
