# tests/conftest.py
from contextlib import asynccontextmanager

import httpx
import pytest

_REAL_ASYNC_CLIENT = httpx.AsyncClient


class FakePage:
    """Stands in for a Playwright page: canned HTML, scripted evaluate/goto results."""

    def __init__(self, html="", url="https://www.example.com/product/1", evaluate_results=None, goto_errors=None):
        self.url = url
        self._html = html
        self._evaluate_results = list(evaluate_results or [])
        self._goto_errors = list(goto_errors or [])
        self.goto_calls = []
        self.evaluated = []
        self.waited = []

    async def content(self):
        return self._html

    async def evaluate(self, script, arg=None):
        self.evaluated.append(script)
        if self._evaluate_results:
            result = self._evaluate_results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return None

    async def wait_for_function(self, script, timeout=None):
        return True

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append((url, wait_until, timeout))
        if self._goto_errors:
            error = self._goto_errors.pop(0)
            if error is not None:
                raise error

    async def wait_for_timeout(self, ms):
        self.waited.append(ms)


class FakePool:
    def __init__(self, page):
        self._page = page
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def page(self):
        self.opened += 1
        try:
            yield self._page
        finally:
            self.closed += 1


@pytest.fixture
def make_page():
    return FakePage


@pytest.fixture
def make_pool():
    return FakePool


@pytest.fixture
def mock_vendor(monkeypatch):
    """Route vendor API calls through an httpx.MockTransport handler."""

    def install(handler):
        def factory(**kwargs):
            return _REAL_ASYNC_CLIENT(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr("src.extraction.vendor_api.httpx.AsyncClient", factory)

    return install
