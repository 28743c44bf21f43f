# src/extraction/vendor_api.py
from __future__ import annotations

import logging
import os

import httpx

from src.core.errors import VendorAPIError
from src.core.urls import absolutize, strip_query

logger = logging.getLogger(__name__)

API_BASE_URLS = {
    "hm": "https://api.hm.com/search-services/v1",
    "ajio": "https://www.ajio.com/api",
    "bewakoof": "https://www.bewakoof.com/_next/data",
}

API_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}


def _timeout() -> float:
    return float(os.environ.get("VENDOR_API_TIMEOUT_SECONDS", "20"))


async def fetch_json(url: str, params: dict | None = None, timeout: float | None = None):
    """Single GET against a merchant API. Non-2xx answers raise VendorAPIError."""
    logger.info(f"Fetching vendor API: {url}")
    async with httpx.AsyncClient(
        headers=API_HEADERS,
        timeout=timeout or _timeout(),
        follow_redirects=True,
    ) as client:
        resp = await client.get(url, params=params)
    if not resp.is_success:
        raise VendorAPIError(url, resp.status_code, resp.reason_phrase)
    return resp.json()


def product_resource_url(url: str, suffix: str) -> str:
    """Product page URL without query/fragment, plus the storefront's data suffix."""
    return strip_query(url) + suffix


def dig(data, *path):
    """Walk nested dicts/lists; any missing step yields None."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return None
        elif not isinstance(current, dict):
            return None
        current = current[key] if isinstance(key, int) else current.get(key)
        if current is None:
            return None
    return current


def image_ref(item) -> str | None:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        ref = item.get("url") or item.get("src")
        if isinstance(ref, str):
            return ref
    return None


def gallery_urls(items, origin: str) -> list[str]:
    """Absolute URLs for a gallery array of strings or ``{url|src}`` objects."""
    if not isinstance(items, list):
        return []
    urls = []
    for item in items:
        resolved = absolutize(image_ref(item), origin)
        if resolved:
            urls.append(resolved)
    return urls
