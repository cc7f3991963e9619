"""
hytale_rss

Scrapes the Hytale news listing page and republishes it as an RSS 2.0 feed.

Core ideas:
- Input: https://hytale.com/news (HTML)
- Process: fetch → parse → find post wrappers → extract fields → build feed → publish
- Output: FeedDocument held by a FeedStore, served at /feed.xml

Example
-------
from hytale_rss import FeedRefresher, FeedStore, render_rss

store = FeedStore()
FeedRefresher(store).refresh()

print(render_rss(store.get()).decode("utf-8"))
"""
from .models import FeedDocument, NewsItem
from .store import FeedStore
from .core import FeedRefresher
from .feed import build_feed, render_rss
from .exceptions import DateParseError, FetchError, ParseError

__all__ = [
    "NewsItem",
    "FeedDocument",
    "FeedStore",
    "FeedRefresher",
    "build_feed",
    "render_rss",
    "FetchError",
    "ParseError",
    "DateParseError",
]
