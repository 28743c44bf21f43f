# src/adapters/flipkart.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import page_origin, page_soup, resolve_image

logger = logging.getLogger(__name__)

HERO_IMAGE = 'img[fetchpriority="high"]'
THUMBNAIL_PREFIX = "https://rukminim2.flixcart.com/image/128/128/"


def extract_from_soup(soup, origin: str) -> dict:
    image = resolve_image(soup.select_one(HERO_IMAGE), origin, ["src"])
    thumbnails = []
    for img in soup.find_all("img"):
        src = resolve_image(img, origin)
        if src and src.startswith(THUMBNAIL_PREFIX):
            thumbnails.append(src)
    return {"image": image, "imageList": thumbnails}


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Flipkart extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="flipkart",
    domains=("flipkart.com",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
