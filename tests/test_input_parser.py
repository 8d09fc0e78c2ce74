"""
Tests for brand list input parsing.
"""

import pytest

from brand_collector.input_parser import decode_upload, has_allowed_extension, parse_brand_names


class TestParseBrandNames:
    """Test parse_brand_names splitting and filtering."""

    def test_header_and_separators(self):
        assert parse_brand_names("Brand Name\nNike\n, Apple,\n") == ["Nike", "Apple"]

    def test_windows_newlines(self):
        assert parse_brand_names("Nike\r\nApple\r\n") == ["Nike", "Apple"]

    def test_quotes_stripped(self):
        assert parse_brand_names('"Nike"\n\'Apple\'\n"Coca Cola"') == ["Nike", "Apple", "Coca Cola"]

    def test_single_quote_stripped_per_side(self):
        assert parse_brand_names("\"Levi's'\"\n''Nike''") == ["Levi's'", "'Nike'"]

    @pytest.mark.parametrize("header", ["brand", "NAME", "brand_name", "Brand Name", "company", "Company Name", '"Brand"'])
    def test_header_tokens_dropped(self, header):
        assert parse_brand_names(f"{header}\nZara") == ["Zara"]

    def test_header_token_inside_name_kept(self):
        assert parse_brand_names("The Brand Company") == ["The Brand Company"]

    @pytest.mark.parametrize("text", ["", "\n\n", " , ,", '""', None])
    def test_empty(self, text):
        assert parse_brand_names(text) == []


class TestUploadHelpers:
    @pytest.mark.parametrize("filename,allowed", [
        ("brands.csv", True),
        ("BRANDS.CSV", True),
        ("brands.txt", False),
        ("brands", False),
        ("", False),
    ])
    def test_extension(self, filename, allowed):
        assert has_allowed_extension(filename, [".csv"]) is allowed

    def test_decode_strips_bom(self):
        assert decode_upload("\ufeffNike\nApple".encode("utf-8")) == "Nike\nApple"
