from __future__ import annotations

from typing import Optional

import requests

from .exceptions import FetchError

SOURCE_URL = "https://hytale.com/news"

DEFAULT_TIMEOUT_SEC = 15.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def fetch_page(
    url: str = SOURCE_URL,
    *,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    GET a page and return its raw body.

    Raises FetchError on network errors, timeouts and non-2xx responses.
    """
    http = session or requests
    try:
        resp = http.get(url, headers={"User-Agent": user_agent}, timeout=timeout_sec)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch page: {url} ({e})") from e
    return resp.content
