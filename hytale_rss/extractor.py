from __future__ import annotations

from typing import List

from bs4.element import PageElement

from .models import NewsItem
from .navigator import (
    element_matcher,
    find_children,
    find_descendants,
    get_attribute,
    is_element,
    text_content,
)
from .normalizer import normalize_date, normalize_link, truncate_description

# Class-name contracts of the hytale.com news listing markup.
is_post_wrapper = element_matcher("div", "postWrapper")
is_heading = element_matcher("h4", "post__details__heading")
is_post_link = element_matcher("a", "post")
is_meta = element_matcher("span", "post__details__meta")
is_date = element_matcher("span", "post__details__meta__date")
is_body = element_matcher("span", "post__details__body")


def extract_date(meta: PageElement) -> str:
    """
    Read the post date from the direct children of a meta span.

    Returns the normalized date of the last parsable date span, or "".
    """
    date = ""
    for span in find_children(meta, is_date):
        normalized = normalize_date(text_content(span))
        if normalized:
            date = normalized
    return date


def extract_post(wrapper: PageElement) -> NewsItem:
    """
    Build a NewsItem from one post wrapper subtree.

    Fields are looked up at any depth. Later headings, links and meta spans
    overwrite earlier ones; only the first non-empty body becomes the
    description. Missing fields are left empty.
    """
    title = ""
    link = ""
    date = ""
    description = ""

    for node in find_descendants(wrapper, is_element):
        if is_heading(node):
            title = text_content(node)
        if is_post_link(node):
            href = get_attribute(node, "href")
            if href:
                link = normalize_link(href)
        if is_meta(node):
            date = extract_date(node)
        if not description and is_body(node):
            description = truncate_description(text_content(node))

    return NewsItem(title=title, link=link, date=date, description=description)


def scrape_news_items(document: PageElement) -> List[NewsItem]:
    """
    Extract every post on the page, in document order, dropping untitled ones.
    Nested post wrappers are each extracted on their own.
    """
    items = [extract_post(w) for w in find_descendants(document, is_post_wrapper)]
    return [it for it in items if it.title]
