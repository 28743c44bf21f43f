# src/api/routes/images.py
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.core.errors import ExtractionFailed, InvalidURL, UnsupportedDomain
from src.extraction.orchestrator import ImageExtractor
from src.registry.domains import lookup, supported_domains

logger = logging.getLogger("kloth.api")

router = APIRouter(tags=["images"])

_extractor: ImageExtractor | None = None


def _get_extractor() -> ImageExtractor:
    global _extractor
    if _extractor is None:
        _extractor = ImageExtractor()
    return _extractor


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _is_well_formed(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


@router.get("/extract-images")
async def extract_images(
    url: Optional[str] = Query(default=None),
    extractor: ImageExtractor = Depends(_get_extractor),
):
    if not url:
        return _error(400, "URL parameter is required")
    if not _is_well_formed(url):
        return _error(400, "Invalid URL format")

    try:
        result = await extractor.extract(url)
    except InvalidURL:
        return _error(400, "Invalid URL format")
    except UnsupportedDomain as e:
        logger.info(f"Unsupported domain requested: {e.domain}")
        return _error(400, str(e))
    except ExtractionFailed as e:
        logger.error(f"Extraction failed for {url}: {e}")
        return _error(500, str(e))

    return {"success": True, "url": url, **result.to_payload()}


@router.get("/domains")
def list_domains():
    entries = []
    for domain in supported_domains():
        adapter = lookup(domain)
        entries.append({"domain": domain, "adapter": adapter.name, "requires_rendering": adapter.requires_rendering})
    return entries
