# tests/api/test_api.py
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from src.api.main import app
from src.api.routes.images import _get_extractor
from src.core.errors import ExtractionFailed, InvalidURL, UnsupportedDomain
from src.core.models import ExtractionResult
from src.registry.domains import DOMAIN_ADAPTERS


class StubExtractor:
    def __init__(self, result=None, error=None):
        self.result = result or ExtractionResult()
        self.error = error
        self.calls = []

    async def extract(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def stub():
    return StubExtractor()


@pytest.fixture
def client(stub):
    app.dependency_overrides[_get_extractor] = lambda: stub

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


class TestMeta:
    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Kloth.me Image Scraper API"
        assert "extractImages" in body["endpoints"]

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Endpoint not found"}

    def test_domains(self, client):
        resp = client.get("/api/domains")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == len(DOMAIN_ADAPTERS)
        hm = next(d for d in data if d["domain"] == "hm.com")
        assert hm == {"domain": "hm.com", "adapter": "hm", "requires_rendering": False}


class TestExtractImages:
    def test_success(self, client, stub):
        stub.result = ExtractionResult(
            image="https://m.media-amazon.com/main.jpg",
            image_list=["https://m.media-amazon.com/main.jpg", "https://m.media-amazon.com/2.jpg"],
        )
        url = "https://www.amazon.in/dp/B0CX23V2ZK"
        resp = client.get("/api/extract-images", params={"url": url})
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "url": url,
            "image": "https://m.media-amazon.com/main.jpg",
            "imageList": ["https://m.media-amazon.com/main.jpg", "https://m.media-amazon.com/2.jpg"],
        }
        assert stub.calls == [url]

    def test_nothing_found_is_still_success(self, client):
        resp = client.get("/api/extract-images", params={"url": "https://www.myntra.com/x/1/buy"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["image"] is None
        assert body["imageList"] == []

    def test_missing_url(self, client, stub):
        resp = client.get("/api/extract-images")
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "URL parameter is required"}
        assert stub.calls == []

    def test_malformed_url(self, client, stub):
        resp = client.get("/api/extract-images", params={"url": "not a url"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid URL format"
        assert stub.calls == []

    def test_invalid_url_from_extractor(self, client, stub):
        stub.error = InvalidURL("https://")
        resp = client.get("/api/extract-images", params={"url": "https://:80"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid URL format"

    def test_unsupported_domain(self, client, stub):
        stub.error = UnsupportedDomain("example.org")
        resp = client.get("/api/extract-images", params={"url": "https://example.org/item"})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Domain 'example.org' is not supported"}

    def test_extraction_failed(self, client, stub):
        stub.error = ExtractionFailed("Failed to extract images: Timeout 60000ms exceeded")
        resp = client.get("/api/extract-images", params={"url": "https://www.amazon.in/dp/x"})
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Failed to extract images: Timeout 60000ms exceeded"}


def test_domains_listing_follows_supported_domains(client):
    with patch("src.api.routes.images.supported_domains", return_value=["myntra.com"]):
        resp = client.get("/api/domains")
    assert resp.json() == [{"domain": "myntra.com", "adapter": "myntra", "requires_rendering": True}]
