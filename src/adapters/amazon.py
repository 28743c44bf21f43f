# src/adapters/amazon.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import IMAGE_SRC_ATTRS, page_origin, page_soup, resolve_all, resolve_image

logger = logging.getLogger(__name__)

MAIN_IMAGE_BLOCK = '[data-csa-c-action="image-block-main-image-hover"]'
THUMBNAILS = ".imageThumbnail img"
# Amazon never serves data-original on the image block
SRC_ATTRS = IMAGE_SRC_ATTRS[:3]


def extract_from_soup(soup, origin: str) -> dict:
    block = soup.select_one(MAIN_IMAGE_BLOCK)
    image = resolve_image(block.find("img"), origin, SRC_ATTRS) if block else None
    image_list = resolve_all(soup.select(THUMBNAILS), origin, SRC_ATTRS)
    return {"image": image, "imageList": image_list}


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Amazon extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="amazon",
    domains=("amazon.in", "amazon.com", "amazon.co.uk", "amazon.com.au"),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
