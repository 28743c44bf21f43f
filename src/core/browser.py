# src/core/browser.py
from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

EXTRA_HEADERS = {
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Upgrade-Insecure-Requests": "1",
}

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
    "--disable-web-security",
    "--disable-features=IsolateOrigins,site-per-process",
]

HIDE_AUTOMATION_JS = """
Object.defineProperty(navigator, 'webdriver', { get: () => false });
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
"""

VIEWPORT = {"width": 1920, "height": 1080}


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() not in ("0", "false", "no", "")


class BrowserPool:
    """One Chromium process shared by every request, one browser context per page.

    The process is launched lazily; concurrent first callers wait on the same
    launch. A disconnected browser is relaunched on the next request.
    """

    def __init__(self, headless: bool | None = None, executable_path: str | None = None):
        self._headless = headless if headless is not None else _env_flag("BROWSER_HEADLESS", "true")
        self._executable_path = executable_path or os.environ.get("BROWSER_EXECUTABLE_PATH") or None
        self._playwright = None
        self._browser = None
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def _launch(self):
        from playwright.async_api import async_playwright

        if self._playwright is None:
            self._playwright = await async_playwright().start()
        kwargs: dict = {"headless": self._headless, "args": LAUNCH_ARGS}
        if self._executable_path:
            kwargs["executable_path"] = self._executable_path
        logger.info(f"Launching Chromium (headless={self._headless})")
        return await self._playwright.chromium.launch(**kwargs)

    async def get_browser(self):
        if self.is_running:
            return self._browser
        async with self._lock:
            if not self.is_running:
                if self._browser is not None:
                    logger.warning("Shared browser disconnected, relaunching")
                self._browser = await self._launch()
        return self._browser

    @asynccontextmanager
    async def page(self):
        """Fresh page in its own context; only that context is closed afterwards."""
        browser = await self.get_browser()
        context = await browser.new_context(
            user_agent=USER_AGENT,
            viewport=VIEWPORT,
            extra_http_headers=EXTRA_HEADERS,
            ignore_https_errors=True,
        )
        try:
            await context.add_init_script(HIDE_AUTOMATION_JS)
            page = await context.new_page()
            yield page
        finally:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Closing page context failed: {e}")

    async def close(self) -> None:
        async with self._lock:
            if self._browser is not None:
                try:
                    await self._browser.close()
                except Exception as e:
                    logger.debug(f"Browser close failed: {e}")
                self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None


_pool: BrowserPool | None = None


def get_browser_pool() -> BrowserPool:
    global _pool
    if _pool is None:
        _pool = BrowserPool()
    return _pool


async def reset_browser_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
    _pool = None
