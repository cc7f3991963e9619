from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable

from .models import FeedDocument, NewsItem

CHANNEL_TITLE = "Hytale News"
CHANNEL_LINK = "https://hytale.com/news"
CHANNEL_DESCRIPTION = "Latest news from Hytale"

RSS_VERSION = "2.0"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

REPLACEMENT_CHAR = "\ufffd"
# Complement of the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def build_feed(title: str, link: str, description: str, items: Iterable[NewsItem]) -> FeedDocument:
    """
    Assemble a FeedDocument. Items keep the order they were extracted in.
    """
    return FeedDocument(title=title, link=link, description=description, items=tuple(items))


def xml_safe(text: str) -> str:
    """Replace characters outside the XML 1.0 Char production with U+FFFD."""
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHAR, text)


def _add_text(parent: ET.Element, tag: str, text: str) -> None:
    # ElementTree escapes markup characters but writes control characters verbatim
    ET.SubElement(parent, tag).text = xml_safe(text)


def render_rss(feed: FeedDocument) -> bytes:
    """
    Serialize a feed as an indented RSS 2.0 document preceded by the XML declaration.
    """
    rss = ET.Element("rss", version=RSS_VERSION)
    channel = ET.SubElement(rss, "channel")
    _add_text(channel, "title", feed.title)
    _add_text(channel, "link", feed.link)
    _add_text(channel, "description", feed.description)
    for item in feed.items:
        node = ET.SubElement(channel, "item")
        _add_text(node, "title", item.title)
        _add_text(node, "link", item.link)
        _add_text(node, "description", item.description)
        _add_text(node, "pubDate", item.date)

    ET.indent(rss, space="  ")
    # Empty fields render as <pubDate></pubDate> rather than <pubDate />
    body = ET.tostring(rss, encoding="unicode", short_empty_elements=False)
    return (XML_HEADER + body).encode("utf-8")
