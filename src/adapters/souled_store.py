# src/adapters/souled_store.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import page_origin, page_soup, resolve_all, resolve_image

logger = logging.getLogger(__name__)

PRODUCT_CONTAINER = ".mdproduct"


def extract_from_soup(soup, origin: str) -> dict:
    container = soup.select_one(PRODUCT_CONTAINER)
    if container is None:
        return empty_gallery()
    imgs = container.find_all("img")
    image = resolve_image(imgs[0], origin) if imgs else None
    return {"image": image, "imageList": resolve_all(imgs, origin)}


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Souled Store extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="souled_store",
    domains=("thesouledstore.com",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
