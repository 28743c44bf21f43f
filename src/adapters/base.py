# src/adapters/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from src.core.models import ExtractionStrategy

# (page or None, product url) -> None | image url | {"image": ..., "imageList": [...]}
AdapterRun = Callable[[Optional[Any], str], Awaitable[Any]]


@dataclass(frozen=True)
class SiteAdapter:
    name: str
    domains: tuple[str, ...]
    strategy: ExtractionStrategy
    run: AdapterRun

    @property
    def requires_rendering(self) -> bool:
        return self.strategy != ExtractionStrategy.VENDOR_API


def empty_gallery() -> dict:
    return {"image": None, "imageList": []}
