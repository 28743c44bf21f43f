# src/adapters/shoppers_stop.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter
from src.core.models import ExtractionStrategy
from src.extraction.dom import page_origin, page_soup, resolve_image

logger = logging.getLogger(__name__)

HERO_CLASSES = {"size-full", "object-contain"}


def extract_from_soup(soup, origin: str) -> str | None:
    for img in soup.select('img[loading="lazy"]'):
        if HERO_CLASSES.issubset(img.get("class") or []):
            src = resolve_image(img, origin)
            if src:
                return src
    return None


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Shoppers Stop extraction failed for {url}: {e}")
        return None


ADAPTER = SiteAdapter(
    name="shoppers_stop",
    domains=("shoppersstop.com",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
