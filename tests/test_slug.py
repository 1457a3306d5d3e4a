"""Tests for slug derivation."""

import re

import pytest

from gallery.utils.slug import fallback_slug, slugify

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class TestSlugify:
    def test_lowercases_and_hyphenates(self):
        assert slugify("Sunset View") == "sunset-view"

    def test_strips_diacritics(self):
        assert slugify("Café Crème Brûlée") == "cafe-creme-brulee"

    def test_removed_punctuation_does_not_split_words(self):
        assert slugify("It's (really) great!") == "its-really-great"

    def test_collapses_separator_runs(self):
        assert slugify("  hello___world -- again  ") == "hello-world-again"

    def test_keeps_digits(self):
        assert slugify("Tokyo 2024 / Night") == "tokyo-2024-night"

    def test_deterministic(self):
        assert slugify("Golden Hour") == slugify("Golden Hour")

    def test_transliterates_letters(self):
        assert slugify("Straße") == "strasse"
        assert slugify("Ørsted Park") == "orsted-park"
        assert slugify("Łódź") == "lodz"

    def test_non_latin_scripts_are_romanised(self):
        assert SLUG_PATTERN.match(slugify("风景摄影"))

    def test_symbols_spelled_out(self):
        assert slugify("Rock & Roll") == "rock-and-roll"
        assert slugify("100% Pure") == "100-percent-pure"

    @pytest.mark.parametrize("text", ["!!!", "***", "   ", "", "'@:"])
    def test_unusable_text_gives_empty_slug(self, text):
        assert slugify(text) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Sunset View",
            "-leading and trailing-",
            "a/b\\c?d#e&f=g",
            "Ünïcödé   Ñame",
            "tabs\tand\nnewlines",
            "emoji 📷 inside",
            "snake_case_title",
            "100% Pure: Mountains @ Dawn",
        ],
    )
    def test_only_url_safe_characters(self, text):
        slug = slugify(text)
        assert SLUG_PATTERN.match(slug), slug


def test_fallback_slug_uses_prefix():
    slug = fallback_slug("set")
    assert slug.startswith("set-")
    assert SLUG_PATTERN.match(slug)
    assert fallback_slug("set") != slug
