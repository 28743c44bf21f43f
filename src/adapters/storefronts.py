# src/adapters/storefronts.py
"""Merchants whose storefronts expose the product as JSON next to the page.

Appending ``.json`` to a product URL returns ``{"product": {...}}``; appending
``.js`` returns the bare product with ``featured_image`` and ``images``.
"""
from __future__ import annotations

import logging

from src.adapters.base import SiteAdapter, empty_gallery
from src.core.models import ExtractionStrategy
from src.core.urls import absolutize, origin_of
from src.extraction.vendor_api import dig, fetch_json, gallery_urls, image_ref, product_resource_url

logger = logging.getLogger(__name__)


async def fetch_product(url: str, suffix: str):
    return await fetch_json(product_resource_url(url, suffix))


def product_json_result(data, origin: str) -> dict:
    """``.json`` shape: ``product.image.src`` plus ``product.images``."""
    return {
        "image": absolutize(dig(data, "product", "image", "src"), origin),
        "imageList": gallery_urls(dig(data, "product", "images"), origin),
    }


def product_js_result(data, origin: str) -> dict:
    """``.js`` shape: ``featured_image`` plus ``images``."""
    featured = dig(data, "featured_image")
    return {
        "image": absolutize(image_ref(featured), origin),
        "imageList": gallery_urls(dig(data, "images"), origin),
    }


def _gallery_runner(label: str, suffix: str, parse):
    async def run(page, url: str):
        try:
            data = await fetch_product(url, suffix)
            return parse(data, origin_of(url))
        except Exception as e:
            logger.warning(f"{label} extraction failed for {url}: {e}")
            return empty_gallery()

    run.__name__ = f"run_{label.lower().replace(' ', '_')}"
    return run


async def run_offduty(page, url: str):
    # Offduty only exposes the featured image
    try:
        data = await fetch_product(url, ".js")
        return product_js_result(data, origin_of(url))["image"]
    except Exception as e:
        logger.warning(f"Offduty extraction failed for {url}: {e}")
        return None


HOUSE_OF_RARE = SiteAdapter(
    name="the_house_of_rare",
    domains=("thehouseofrare.com",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("House of Rare", ".json", product_json_result),
)

AACHHO = SiteAdapter(
    name="aachho",
    domains=("aachho.com",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("Aachho", ".js", product_js_result),
)

SAADAA = SiteAdapter(
    name="saadaa",
    domains=("saadaa.in",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("Saadaa", ".json", product_json_result),
)

HOUSE_OF_CHIKANKARI = SiteAdapter(
    name="house_of_chikankari",
    domains=("houseofchikankari.in",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("House of Chikankari", ".json", product_json_result),
)

OFFDUTY = SiteAdapter(
    name="offduty",
    domains=("offduty.in",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=run_offduty,
)

FREAKINS = SiteAdapter(
    name="freakins",
    domains=("freakins.com",),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("Freakins", ".js", product_js_result),
)

W_FOR_WOMAN = SiteAdapter(
    name="w_for_woman",
    domains=("wforwomen.com", "wforwoman.com"),
    strategy=ExtractionStrategy.VENDOR_API,
    run=_gallery_runner("W for Woman", ".js", product_js_result),
)
