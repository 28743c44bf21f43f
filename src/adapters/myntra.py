# src/adapters/myntra.py
"""Myntra renders product photos as CSS background images on a lazy grid.

Placeholder tiles are scrolled into view first so every tile carries its real
background before the grid is read.
"""
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import css_url, inline_background, page_origin, page_soup

logger = logging.getLogger(__name__)

GRID_CONTAINER = ".image-grid-container"
GRID_TILE = ".image-grid-image"
LAZY_WAIT_MS = 2000

SCROLL_PLACEHOLDERS_JS = """
async () => {
    const container = document.querySelector('.image-grid-container');
    if (!container) {
        return;
    }
    const placeholders = Array.from(container.querySelectorAll('.lazyload-placeholder'));
    for (const placeholder of placeholders) {
        placeholder.scrollIntoView({ block: 'center' });
        await new Promise(resolve => setTimeout(resolve, 200));
    }
}
"""

PLACEHOLDERS_GONE_JS = """
() => {
    const container = document.querySelector('.image-grid-container');
    if (!container) {
        return true;
    }
    return container.querySelectorAll('.lazyload-placeholder').length === 0;
}
"""

READ_BACKGROUNDS_JS = """
() => {
    const read = (el) => window.getComputedStyle(el).backgroundImage || el.style.backgroundImage || null;
    const first = document.querySelector('.image-grid-image');
    const container = document.querySelector('.image-grid-container');
    return {
        primary: first ? read(first) : null,
        tiles: container ? Array.from(container.querySelectorAll('.image-grid-image')).map(read) : [],
    };
}
"""


async def ensure_gallery_loaded(page) -> None:
    try:
        await page.evaluate(SCROLL_PLACEHOLDERS_JS)
        await page.wait_for_function(PLACEHOLDERS_GONE_JS, timeout=LAZY_WAIT_MS)
    except Exception as e:
        # Proceed with whatever tiles have rendered
        logger.debug(f"Myntra lazy tiles still pending: {e}")


def backgrounds_to_result(backgrounds: dict, origin: str) -> dict:
    image = css_url(backgrounds.get("primary"), origin)
    image_list = []
    for value in backgrounds.get("tiles") or []:
        src = css_url(value, origin)
        if src:
            image_list.append(src)
    return {"image": image, "imageList": image_list}


def extract_from_soup(soup, origin: str) -> dict:
    """Inline-style reading of the grid, used when computed styles are unavailable."""
    first = soup.select_one(GRID_TILE)
    container = soup.select_one(GRID_CONTAINER)
    tiles = container.select(GRID_TILE) if container else []
    return backgrounds_to_result(
        {
            "primary": inline_background(first),
            "tiles": [inline_background(tile) for tile in tiles],
        },
        origin,
    )


async def run(page, url: str):
    try:
        origin = page_origin(page)
        await ensure_gallery_loaded(page)
        backgrounds = await page.evaluate(READ_BACKGROUNDS_JS)
        result = backgrounds_to_result(backgrounds or {}, origin)
        if result["image"] is None and not result["imageList"]:
            result = extract_from_soup(await page_soup(page), origin)
        return result
    except Exception as e:
        logger.warning(f"Myntra extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="myntra",
    domains=("myntra.com",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
