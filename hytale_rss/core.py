from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .extractor import scrape_news_items
from .feed import CHANNEL_DESCRIPTION, CHANNEL_LINK, CHANNEL_TITLE, build_feed
from .fetcher import DEFAULT_TIMEOUT_SEC, DEFAULT_USER_AGENT, SOURCE_URL, fetch_page
from .models import FeedDocument
from .parser import parse_document
from .store import FeedStore

logger = logging.getLogger(__name__)


@dataclass
class RefreshOptions:
    url: str = SOURCE_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    user_agent: str = DEFAULT_USER_AGENT


class FeedRefresher:
    """
    High-level API: scrape the Hytale news page and publish it as a feed snapshot.

    Pipeline: fetch → parse → extract posts → build feed → swap into store
    """

    def __init__(
        self,
        store: FeedStore,
        *,
        url: str = SOURCE_URL,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.store = store
        self.options = RefreshOptions(url=url, timeout_sec=timeout_sec, user_agent=user_agent)
        self._session = session

    def refresh(self) -> FeedDocument:
        """
        Run one refresh cycle and publish the result.

        Raises FetchError or ParseError; in that case the store keeps whatever
        it held before.
        """
        logger.info("Scraping Hytale news...")
        content = fetch_page(
            self.options.url,
            timeout_sec=self.options.timeout_sec,
            user_agent=self.options.user_agent,
            session=self._session,
        )
        document = parse_document(content)

        items = scrape_news_items(document)
        feed = build_feed(CHANNEL_TITLE, CHANNEL_LINK, CHANNEL_DESCRIPTION, items)

        self.store.replace(feed)
        logger.info("Scraped %d news items", len(items))
        return feed
