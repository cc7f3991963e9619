"""Tests for hytale_rss.normalizer: link, description and date normalization."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from hytale_rss.exceptions import DateParseError
from hytale_rss.normalizer import (
    normalize_date,
    normalize_link,
    parse_post_date,
    strip_ordinals,
    truncate_description,
)


class TestNormalizeLink:
    def test_relative_href_gets_site_origin(self):
        assert normalize_link("/news/123") == "https://hytale.com/news/123"

    def test_absolute_href_unchanged(self):
        assert normalize_link("https://other.example/x") == "https://other.example/x"

    def test_plain_http_unchanged(self):
        assert normalize_link("http://other.example/x") == "http://other.example/x"


class TestTruncateDescription:
    def test_201_chars_cut_with_marker(self):
        out = truncate_description("a" * 201)
        assert out == "a" * 200 + "..."

    def test_200_chars_untouched(self):
        text = "b" * 200
        assert truncate_description(text) == text

    def test_short_text_untouched(self):
        assert truncate_description("short") == "short"

    def test_counts_characters_not_bytes(self):
        text = "é" * 200
        assert truncate_description(text) == text


class TestDates:
    def test_ordinal_suffix_is_ignored(self):
        assert normalize_date("March 1st 2024") == normalize_date("March 1 2024")

    def test_rfc1123_with_numeric_zone(self):
        assert normalize_date("March 1st 2024") == "Fri, 01 Mar 2024 00:00:00 +0000"
        assert normalize_date("March 5 2024") == "Tue, 05 Mar 2024 00:00:00 +0000"

    def test_each_suffix(self):
        assert normalize_date("January 22nd 2024") == "Mon, 22 Jan 2024 00:00:00 +0000"
        assert normalize_date("May 3rd 2024") == "Fri, 03 May 2024 00:00:00 +0000"
        assert normalize_date("June 4th 2024") == "Tue, 04 Jun 2024 00:00:00 +0000"

    def test_unparsable_is_empty(self):
        assert normalize_date("Soon™") == ""

    def test_empty_is_empty(self):
        assert normalize_date("") == ""

    def test_parse_post_date_raises(self):
        with pytest.raises(DateParseError):
            parse_post_date("2024-03-01")

    def test_parse_post_date_is_utc_midnight(self):
        assert parse_post_date("March 1 2024") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_stripping_is_plain_substring_removal(self):
        assert strip_ordinals("1st 2nd 3rd 4th") == "1 2 3 4"
        # not anchored to digits
        assert strip_ordinals("August 5th 2024") == "Augu 5 2024"
