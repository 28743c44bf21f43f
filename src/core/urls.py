# src/core/urls.py
from __future__ import annotations

from urllib.parse import urlparse, urlunparse


def normalize_domain(url: str) -> str | None:
    """Lower-cased hostname of ``url`` with one leading ``www.`` removed.

    Returns None when the value does not parse to a hostname.
    """
    if not isinstance(url, str):
        return None
    try:
        host = urlparse(url.strip()).hostname
    except ValueError:
        return None
    if not host:
        return None
    host = host.lower()
    if host.startswith("www."):
        host = host[len("www."):]
    return host or None


def origin_of(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def absolutize(value: str | None, origin: str) -> str | None:
    """Resolve an image reference against a page origin.

    ``//host/x`` gets ``https:``, ``/x`` and bare ``x`` are joined to the origin,
    ``http(s)://`` values pass through untouched.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    if value.startswith("http://") or value.startswith("https://"):
        return value
    if value.startswith("//"):
        return "https:" + value
    origin = origin.rstrip("/")
    if value.startswith("/"):
        return origin + value
    return origin + "/" + value


def strip_query(url: str) -> str:
    parsed = urlparse(url)
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, parsed.params, "", ""))
