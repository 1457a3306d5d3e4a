"""Tests for the tag and image list column encodings."""

import logging

import pytest

from gallery.utils.codec import decode_images, decode_tags, encode_images, encode_tags


class TestImages:
    @pytest.mark.parametrize(
        "urls",
        [
            ["https://a.example.com/1.jpg"],
            ["https://a.example.com/1.jpg", "https://a.example.com/2.jpg"],
            ["has,comma", 'has "quotes"', "", "  spaced  "],
            ["https://例え.jp/画像.png", "back\\slash"],
            [],
        ],
    )
    def test_round_trip(self, urls):
        assert decode_images(encode_images(urls)) == urls

    def test_order_preserved(self):
        urls = [f"https://img.example.com/{i}.jpg" for i in range(10, 0, -1)]
        assert decode_images(encode_images(urls)) == urls

    def test_none_is_empty(self):
        assert decode_images(None) == []

    def test_malformed_json_is_empty_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gallery.utils.codec"):
            assert decode_images('["unterminated') == []
        assert "Corrupt image_urls" in caplog.text

    def test_non_list_is_empty(self):
        assert decode_images('{"url": "x"}') == []
        assert decode_images('"just a string"') == []


class TestTags:
    def test_round_trip_trims_and_drops_empty(self):
        tags = [" sunset ", "", "beach", "   ", "golden hour"]
        assert decode_tags(encode_tags(tags)) == ["sunset", "beach", "golden hour"]

    def test_encode_joins_with_commas(self):
        assert encode_tags(["a", "b", "c"]) == "a,b,c"

    def test_duplicates_kept_in_order(self):
        assert decode_tags(encode_tags(["b", "a", "b"])) == ["b", "a", "b"]

    @pytest.mark.parametrize("value", [None, "", ",", " , ,"])
    def test_decode_empty_values(self, value):
        assert decode_tags(value) == []

    def test_comma_inside_tag_splits(self):
        assert decode_tags(encode_tags(["black,white"])) == ["black", "white"]
