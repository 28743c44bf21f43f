# src/extraction/dom.py
from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from src.core.urls import absolutize, origin_of

logger = logging.getLogger(__name__)

# Live src first, then the usual lazy-load attributes
IMAGE_SRC_ATTRS = ["src", "data-src", "data-lazy-src", "data-original"]
GALLERY_SRC_ATTRS = IMAGE_SRC_ATTRS + ["data-url"]
INLINE_PLACEHOLDER_PREFIXES = ("data:", "blob:")

CSS_URL_RE = re.compile(r"""url\(['"]?([^'"]+)['"]?\)""")


def get_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


async def page_soup(page) -> BeautifulSoup:
    return get_soup(await page.content())


def page_origin(page) -> str:
    return origin_of(page.url)


def raw_image_src(img, attrs: list[str] | None = None) -> str | None:
    for attr in attrs or IMAGE_SRC_ATTRS:
        value = img.get(attr)
        if isinstance(value, str) and value.strip():
            value = value.strip()
            # Inline placeholders stand in for the lazy-loaded source
            if value.lower().startswith(INLINE_PLACEHOLDER_PREFIXES):
                continue
            return value
    return None


def resolve_image(img, origin: str, attrs: list[str] | None = None) -> str | None:
    """Absolute source of an ``img`` tag, or None if it cannot be resolved to http(s)."""
    if img is None:
        return None
    src = absolutize(raw_image_src(img, attrs), origin)
    if src and src.startswith("http"):
        return src
    return None


def resolve_all(imgs, origin: str, attrs: list[str] | None = None) -> list[str]:
    """Resolved sources in document order; unresolvable tags are skipped."""
    urls = []
    for img in imgs:
        src = resolve_image(img, origin, attrs or GALLERY_SRC_ATTRS)
        if src:
            urls.append(src)
    return urls


def css_url(style_value: str | None, origin: str) -> str | None:
    """URL inside a CSS ``url(...)`` token, e.g. a background-image value."""
    if not style_value or style_value == "none":
        return None
    match = CSS_URL_RE.search(style_value)
    if not match:
        return None
    src = absolutize(match.group(1), origin)
    if src and src.startswith("http"):
        return src
    return None


def inline_background(tag) -> str | None:
    style = tag.get("style") if tag is not None else None
    if not style:
        return None
    for decl in style.split(";"):
        name, _, value = decl.partition(":")
        if name.strip().lower() in ("background-image", "background"):
            return value.strip()
    return None
