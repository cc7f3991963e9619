from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import format_datetime

from .exceptions import DateParseError

SITE_ORIGIN = "https://hytale.com"

DESCRIPTION_LIMIT = 200
TRUNCATION_MARKER = "..."

# e.g. "March 5 2024", after ordinal suffixes are removed
POST_DATE_FORMAT = "%B %d %Y"

# Plain substring removal, not anchored to digits ("August" loses its "st" too)
_ORDINAL_SUFFIXES = re.compile("st|nd|rd|th")


def normalize_link(href: str) -> str:
    """
    Make a post href absolute. Hrefs that already start with "http" are kept as is.
    """
    if href.startswith("http"):
        return href
    return SITE_ORIGIN + href


def truncate_description(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def strip_ordinals(text: str) -> str:
    return _ORDINAL_SUFFIXES.sub("", text)


def parse_post_date(text: str) -> datetime:
    """
    Parse a listing date such as "March 1st 2024" into a UTC datetime at midnight.

    Raises DateParseError when the text does not match POST_DATE_FORMAT once
    ordinal suffixes are stripped.
    """
    cleaned = strip_ordinals(text)
    try:
        parsed = datetime.strptime(cleaned, POST_DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(f"Unrecognized post date: {text!r}") from e
    return parsed.replace(tzinfo=timezone.utc)


def format_rfc1123z(dt: datetime) -> str:
    # "Tue, 05 Mar 2024 00:00:00 +0000"
    return format_datetime(dt)


def normalize_date(text: str) -> str:
    """
    Convert listing date text to an RFC-1123 string with numeric zone.
    Empty or unparsable text yields "" instead of an error.
    """
    if not text:
        return ""
    try:
        return format_rfc1123z(parse_post_date(text))
    except DateParseError:
        return ""
