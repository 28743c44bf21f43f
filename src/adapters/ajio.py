# src/adapters/ajio.py
from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from src.adapters.base import SiteAdapter
from src.core.models import ExtractionStrategy
from src.core.urls import absolutize, origin_of
from src.extraction.vendor_api import API_BASE_URLS, dig, fetch_json

logger = logging.getLogger(__name__)

PRODUCT_ID_RE = re.compile(r"/p/([^/]+)")


def extract_product_id(url: str) -> str | None:
    try:
        match = PRODUCT_ID_RE.search(urlparse(url).path)
    except ValueError:
        return None
    return match.group(1) if match else None


def image_from_response(data) -> str | None:
    return dig(data, "baseOptions", 0, "options", 0, "modelImage", "url")


async def run(page, url: str):
    try:
        product_id = extract_product_id(url)
        if not product_id:
            logger.warning(f"No Ajio product id in {url}")
            return None
        data = await fetch_json(f"{API_BASE_URLS['ajio']}/p/{product_id}")
        return absolutize(image_from_response(data), origin_of(url))
    except Exception as e:
        logger.warning(f"Ajio extraction failed for {url}: {e}")
        return None


ADAPTER = SiteAdapter(
    name="ajio",
    domains=("ajio.com",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=run,
)
