# src/extraction/orchestrator.py
from __future__ import annotations

import logging
import os

from src.core.browser import BrowserPool, get_browser_pool
from src.core.errors import ExtractionError, ExtractionFailed, InvalidURL, TransientNavigation, UnsupportedDomain
from src.core.models import ExtractionResult
from src.core.urls import normalize_domain
from src.extraction.normalizer import normalize_result
from src.registry.domains import lookup

logger = logging.getLogger(__name__)

TRANSIENT_MARKERS = ("socket", "hang up")


def is_transient_navigation_error(exc: BaseException) -> bool:
    message = str(exc)
    return any(marker in message for marker in TRANSIENT_MARKERS)


async def navigate(page, url: str, timeout_ms: int) -> None:
    """Load ``url``; a connection reset gets exactly one retry on network idle."""
    try:
        await page.goto(url, wait_until="load", timeout=timeout_ms)
        return
    except Exception as e:
        if not is_transient_navigation_error(e):
            raise
        logger.warning(f"Navigation to {url} dropped ({e}), retrying on network idle")

    try:
        await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
    except Exception as e:
        raise TransientNavigation(f"Connection was closed by the server while loading {url}: {e}") from e


class ImageExtractor:
    def __init__(
        self,
        browser_pool: BrowserPool | None = None,
        navigation_timeout_ms: int | None = None,
        settle_delay_ms: int | None = None,
    ):
        self._pool = browser_pool
        self._navigation_timeout = navigation_timeout_ms or int(os.environ.get("NAVIGATION_TIMEOUT_MS", "60000"))
        self._settle_delay = (
            settle_delay_ms if settle_delay_ms is not None else int(os.environ.get("SETTLE_DELAY_MS", "1500"))
        )

    @property
    def browser_pool(self) -> BrowserPool:
        if self._pool is None:
            self._pool = get_browser_pool()
        return self._pool

    async def extract(self, url: str) -> ExtractionResult:
        domain = normalize_domain(url)
        if domain is None:
            raise InvalidURL(url)

        adapter = lookup(domain)
        if adapter is None:
            raise UnsupportedDomain(domain)

        logger.info(f"Extracting {url} with {adapter.name} ({adapter.strategy.value})")

        if not adapter.requires_rendering:
            try:
                raw = await adapter.run(None, url)
            except Exception as e:
                raise ExtractionFailed(f"Failed to extract images: {e}") from e
            return normalize_result(raw)

        try:
            async with self.browser_pool.page() as page:
                await navigate(page, url, self._navigation_timeout)
                if self._settle_delay:
                    await page.wait_for_timeout(self._settle_delay)
                raw = await adapter.run(page, url)
        except TransientNavigation as e:
            raise ExtractionFailed(str(e)) from e
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionFailed(f"Failed to extract images: {e}") from e

        result = normalize_result(raw)
        logger.info(f"Extracted {len(result.image_list)} gallery image(s) from {domain} (primary found: {result.found})")
        return result
