"""
Tests for the brand record models.
"""

import pytest

from brand_collector.models import Brand, ContactInfo, ResponseMeta, SocialMedia, coerce_text


class TestCoerceText:
    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        ("Nike", "Nike"),
        (1964, "1964"),
        (2.5, "2.5"),
        (False, "false"),
        (["Shoes", "Apparel"], "Shoes, Apparel"),
        ({"nested": "object"}, ""),
    ])
    def test_values(self, value, expected):
        assert coerce_text(value) == expected


class TestBrand:
    """Test Brand defaults and coercion."""

    def test_defaults_keep_every_key(self):
        dumped = Brand().model_dump()

        assert dumped["brand_name"] == ""
        assert dumped["status"] == "Partial"
        assert set(dumped["social_media"]) == set(SocialMedia.model_fields)
        assert set(dumped["contact_info"]) == set(ContactInfo.model_fields)

    def test_blank_status_becomes_partial(self):
        assert Brand.from_record({"brand_name": "X", "status": "  "}).status == "Partial"
        assert Brand.from_record({"brand_name": "X", "status": None}).status == "Partial"

    def test_non_object_blocks(self):
        brand = Brand.from_record({"social_media": "Not Found", "contact_info": ["a"]})
        assert brand.social_media == SocialMedia()
        assert brand.contact_info == ContactInfo()

    def test_unknown_keys_ignored(self):
        brand = Brand.from_record({"brand_name": "Nike", "rank": 1, "social_media": {"x": "https://x.com/nike"}})
        assert "rank" not in brand.model_dump()
        assert brand.social_media.twitter == ""

    def test_not_found_kept_verbatim(self):
        assert Brand.from_record({"logo_url": "Not Found"}).logo_url == "Not Found"


class TestResponseMeta:
    def test_defaults(self):
        assert ResponseMeta().model_dump() == {"total": 0, "complete": 0, "partial": 0}

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            ResponseMeta(total=-1)
