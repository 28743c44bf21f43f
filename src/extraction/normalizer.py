# src/extraction/normalizer.py
from __future__ import annotations

from collections.abc import Mapping

from src.core.models import ExtractionResult


def _clean_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def normalize_result(raw) -> ExtractionResult:
    """Coerce whatever an adapter returned into an ExtractionResult.

    Adapters answer with None, a bare image URL, or a mapping with ``image`` and
    ``imageList``. When no primary image was found the first gallery entry is used.
    """
    if raw is None:
        return ExtractionResult()

    if isinstance(raw, str):
        return ExtractionResult(image=raw or None)

    if isinstance(raw, ExtractionResult):
        image, image_list = raw.image, list(raw.image_list)
    elif isinstance(raw, Mapping):
        image = raw.get("image")
        image_list = _clean_list(raw.get("imageList"))
    else:
        return ExtractionResult()

    if not isinstance(image, str) or not image:
        image = None
    if image is None and image_list:
        image = image_list[0]
    return ExtractionResult(image=image, image_list=image_list)
