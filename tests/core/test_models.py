# tests/core/test_models.py
import pytest
from src.core.models import ExtractionResult, ExtractionStrategy


class TestExtractionResult:
    def test_defaults(self):
        result = ExtractionResult()
        assert result.image is None
        assert result.image_list == []
        assert result.found is False

    def test_gallery_lists_are_independent(self):
        a = ExtractionResult()
        b = ExtractionResult()
        a.image_list.append("https://x/1.jpg")
        assert b.image_list == []

    def test_payload_uses_wire_names(self):
        result = ExtractionResult(image="https://x/1.jpg", image_list=["https://x/1.jpg", "https://x/2.jpg"])
        assert result.to_payload() == {
            "image": "https://x/1.jpg",
            "imageList": ["https://x/1.jpg", "https://x/2.jpg"],
        }


class TestExtractionStrategy:
    def test_values(self):
        assert ExtractionStrategy.DOM_SELECTOR.value == "dom_selector"
        assert ExtractionStrategy.VENDOR_API.value == "vendor_api"
        assert ExtractionStrategy.HYBRID.value == "hybrid"
