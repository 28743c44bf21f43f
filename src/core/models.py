# src/core/models.py
from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field


class ExtractionStrategy(str, enum.Enum):
    DOM_SELECTOR = "dom_selector"
    VENDOR_API = "vendor_api"
    HYBRID = "hybrid"


class ExtractionResult(BaseModel):
    image: Optional[str] = None
    image_list: list[str] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.image is not None

    def to_payload(self) -> dict:
        return {"image": self.image, "imageList": list(self.image_list)}
