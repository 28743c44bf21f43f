# src/adapters/veromoda.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import page_origin, page_soup, resolve_all, resolve_image

logger = logging.getLogger(__name__)

MEDIA_IMAGE = '[data-media-type="image"]'
THUMBNAIL = ".product-gallery__thumbnail"


def extract_from_soup(soup, origin: str) -> dict:
    media = soup.select_one(MEDIA_IMAGE)
    image = resolve_image(media.find("img"), origin) if media else None
    thumbs = [thumb.find("img") for thumb in soup.select(THUMBNAIL)]
    return {"image": image, "imageList": resolve_all([img for img in thumbs if img], origin)}


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Vero Moda extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="veromoda",
    domains=("veromoda.in",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
