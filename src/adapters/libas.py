# src/adapters/libas.py
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.extraction.dom import page_origin, page_soup, resolve_all, resolve_image

logger = logging.getLogger(__name__)

MAIN_MEDIA = "[data-product-image-main]"
# Libas wraps each photo in a custom <image-element>
IMAGE_ELEMENT = "image-element"


def extract_from_soup(soup, origin: str) -> dict:
    image = None
    first_media = soup.select_one(MAIN_MEDIA)
    if first_media is not None:
        element = first_media.find(IMAGE_ELEMENT)
        if element is not None:
            image = resolve_image(element.find("img"), origin)

    gallery_imgs = []
    for media in soup.select(MAIN_MEDIA):
        for element in media.find_all(IMAGE_ELEMENT):
            img = element.find("img")
            if img is not None:
                gallery_imgs.append(img)

    return {"image": image, "imageList": resolve_all(gallery_imgs, origin)}


async def run(page, url: str):
    try:
        soup = await page_soup(page)
        return extract_from_soup(soup, page_origin(page))
    except Exception as e:
        logger.warning(f"Libas extraction failed for {url}: {e}")
        return empty_gallery()


ADAPTER = SiteAdapter(
    name="libas",
    domains=("libas.in",),
    strategy=ExtractionStrategy.DOM_SELECTOR,
    run=run,
)
