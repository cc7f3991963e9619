"""Shared fixtures: a trimmed-down copy of the hytale.com/news listing markup."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from hytale_rss.parser import parse_document

NEWS_PAGE = """<!DOCTYPE html>
<html>
<head><title>News | Hytale</title></head>
<body>
<div class="newsListing">
  <div class="postWrapper">
    <a class="post" href="/news/2024/3/first-post">
      <div class="post__image"></div>
      <div class="post__details">
        <h4 class="post__details__heading">
          First Post
        </h4>
        <span class="post__details__meta">
          <span class="post__details__meta__author">Hypixel Studios</span>
          <span class="post__details__meta__date">March 1st 2024</span>
        </span>
        <span class="post__details__body">  Body of the first post.  </span>
      </div>
    </a>
  </div>
  <div class="postWrapper">
    <a class="post" href="https://blog.example.com/second">
      <div class="post__details">
        <h4 class="post__details__heading">Second Post</h4>
        <span class="post__details__meta">
          <span class="post__details__meta__date">Soon&#8482;</span>
        </span>
      </div>
    </a>
  </div>
  <div class="postWrapper">
    <a class="post" href="/news/2024/3/untitled">
      <div class="post__details">
        <span class="post__details__body">No heading here.</span>
      </div>
    </a>
  </div>
  <div class="postWrapper">
    <div class="post__details">
      <h4 class="post__details__heading">Third Post</h4>
      <span class="post__details__meta">
        <span class="post__details__meta__date">January 22nd 2024</span>
      </span>
    </div>
  </div>
</div>
</body>
</html>
"""


@pytest.fixture
def news_page_bytes() -> bytes:
    return NEWS_PAGE.encode("utf-8")


@pytest.fixture
def news_document():
    return parse_document(NEWS_PAGE)


@pytest.fixture
def make_session():
    """Factory for requests.Session stand-ins whose GET returns `content` with a 200."""

    def _make(content: bytes) -> MagicMock:
        resp = MagicMock()
        resp.content = content
        resp.status_code = 200
        session = MagicMock()
        session.get.return_value = resp
        return session

    return _make
