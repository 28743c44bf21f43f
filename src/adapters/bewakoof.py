# src/adapters/bewakoof.py
"""Bewakoof is a Next.js storefront.

The rendered page is only used to read the current build id from the
``_buildManifest.js`` script; product data then comes from the matching
``/_next/data/<build>/p/<handle>.json`` route.
"""
from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.core.urls import absolutize, origin_of
from src.extraction.dom import page_soup
from src.extraction.vendor_api import API_BASE_URLS, dig, fetch_json

logger = logging.getLogger(__name__)

HANDLE_RE = re.compile(r"/p/(.+)")
BUILD_ID_RE = re.compile(r"/static/([^/]+)/.*?buildManifest\.js")
IMAGE_HOST = "https://images.bewakoof.com/original"


def extract_product_handle(url: str) -> str | None:
    try:
        match = HANDLE_RE.search(urlparse(url).path)
    except ValueError:
        return None
    return match.group(1) if match else None


def build_id_from_soup(soup) -> str | None:
    script = soup.select_one('script[src*="buildManifest.js"]')
    if script is None:
        return None
    match = BUILD_ID_RE.search(script.get("src") or "")
    return match.group(1) if match else None


def api_url(handle: str, build_id: str) -> str:
    return f"{API_BASE_URLS['bewakoof']}/{build_id}/p/{handle}.json?product_handle={handle}"


def result_from_response(data, origin: str) -> dict:
    image = absolutize(dig(data, "pageProps", "productDetails", "meta_image"), origin)
    additional = dig(data, "pageProps", "productDetails", "images", "additional")
    image_list = []
    if isinstance(additional, list):
        for item in additional:
            name = item.get("name") if isinstance(item, dict) else None
            if isinstance(name, str) and name:
                image_list.append(f"{IMAGE_HOST}/{name}")
    return {"image": image, "imageList": image_list}


async def run(page, url: str):
    try:
        handle = extract_product_handle(url)
        if not handle:
            logger.warning(f"No Bewakoof product handle in {url}")
            return empty_gallery()
        build_id = build_id_from_soup(await page_soup(page))
        if not build_id:
            logger.warning(f"No Next.js build id on {url}")
            return empty_gallery()
        logger.info(f"Bewakoof handle={handle} build={build_id}")
        data = await fetch_json(api_url(handle, build_id))
        return result_from_response(data, origin_of(url))
    except Exception as e:
        logger.warning(f"Bewakoof extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="bewakoof",
    domains=("bewakoof.com",),
    strategy=ExtractionStrategy.HYBRID,
    run=run,
)
