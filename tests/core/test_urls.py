# tests/core/test_urls.py
import pytest
from src.core.urls import absolutize, normalize_domain, origin_of, strip_query


class TestNormalizeDomain:
    def test_strips_www(self):
        assert normalize_domain("https://www.myntra.com/dresses/123") == "myntra.com"

    def test_lowercases(self):
        assert normalize_domain("https://WWW.Amazon.IN/dp/B0X") == "amazon.in"

    def test_keeps_other_subdomains(self):
        assert normalize_domain("https://www2.hm.com/en_in/productpage.0863595006.html") == "www2.hm.com"

    def test_strips_only_one_www(self):
        assert normalize_domain("https://www.www.example.com") == "www.example.com"

    @pytest.mark.parametrize("value", ["", "not a url", "/relative/path", None, "http://[::1"])
    def test_unparseable_returns_none(self, value):
        assert normalize_domain(value) is None


class TestAbsolutize:
    ORIGIN = "https://example.com"

    def test_protocol_relative(self):
        assert absolutize("//cdn.x/img.png", self.ORIGIN) == "https://cdn.x/img.png"

    def test_root_relative(self):
        assert absolutize("/img.png", self.ORIGIN) == "https://example.com/img.png"

    def test_bare_path(self):
        assert absolutize("img.png", self.ORIGIN) == "https://example.com/img.png"

    def test_absolute_unchanged(self):
        assert absolutize("https://cdn.x/img.png", self.ORIGIN) == "https://cdn.x/img.png"
        assert absolutize("http://cdn.x/img.png", self.ORIGIN) == "http://cdn.x/img.png"

    def test_empty_values(self):
        assert absolutize("", self.ORIGIN) is None
        assert absolutize(None, self.ORIGIN) is None
        assert absolutize({"src": "x"}, self.ORIGIN) is None


def test_origin_of():
    assert origin_of("https://www.libas.in/products/kurta?variant=1") == "https://www.libas.in"


def test_strip_query_drops_query_and_fragment():
    assert strip_query("https://saadaa.in/products/shirt?variant=12#reviews") == "https://saadaa.in/products/shirt"
