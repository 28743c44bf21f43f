# src/core/errors.py
from __future__ import annotations


class ExtractionError(Exception):
    """Base class for failures surfaced by the extraction orchestrator."""


class InvalidURL(ExtractionError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class UnsupportedDomain(ExtractionError):
    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Domain '{domain}' is not supported")


class TransientNavigation(ExtractionError):
    """Navigation failed with a connection-reset-like signal, even after the lenient retry."""


class ExtractionFailed(ExtractionError):
    pass


class VendorAPIError(Exception):
    """Non-2xx answer from a merchant API. Never escapes an adapter."""

    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url} answered {status_code} {reason}".rstrip())
