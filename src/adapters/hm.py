# src/adapters/hm.py
"""H&M blocks headless browsers, so product images come from its search service."""
from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from src.adapters.base import SiteAdapter
from src.core.models import ExtractionStrategy
from src.core.urls import absolutize, origin_of
from src.extraction.vendor_api import API_BASE_URLS, dig, fetch_json

logger = logging.getLogger(__name__)

PRODUCT_ID_RE = re.compile(r"productpage\.(\d+)\.html")
LOCALE_RE = re.compile(r"/([a-z]{2}_[a-z]{2})/")
DEFAULT_LOCALE = "en_in"


def extract_product_id(url: str) -> str | None:
    try:
        match = PRODUCT_ID_RE.search(urlparse(url).path)
    except ValueError:
        return None
    return match.group(1) if match else None


def extract_locale(url: str) -> str:
    try:
        match = LOCALE_RE.search(urlparse(url).path)
    except ValueError:
        return DEFAULT_LOCALE
    return match.group(1) if match else DEFAULT_LOCALE


def api_request(product_id: str, locale: str = DEFAULT_LOCALE) -> tuple[str, dict]:
    url = f"{API_BASE_URLS['hm']}/{locale}/search/byids"
    params = {"ids": product_id, "touchPoint": "DESKTOP", "pageSource": "pdp-shopthelook"}
    return url, params


def image_from_response(data) -> str | None:
    return dig(data, "articles", "productList", 0, "productImage")


async def run(page, url: str):
    try:
        product_id = extract_product_id(url)
        if not product_id:
            logger.warning(f"No H&M product id in {url}")
            return None
        locale = extract_locale(url)
        logger.info(f"H&M product {product_id} ({locale})")
        api_url, params = api_request(product_id, locale)
        data = await fetch_json(api_url, params=params)
        return absolutize(image_from_response(data), origin_of(url))
    except Exception as e:
        logger.warning(f"H&M extraction failed for {url}: {e}")
        return None


ADAPTER = SiteAdapter(
    name="hm",
    domains=("hm.com", "hm.co.in"),
    strategy=ExtractionStrategy.VENDOR_API,
    run=run,
)
