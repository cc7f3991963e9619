from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NewsItem:
    """
    One news post extracted from the listing page.

    Only `title` is required; the other fields are left empty when the markup lacks them.
    """
    title: str
    link: str = ""
    date: str = ""
    description: str = ""


@dataclass(frozen=True)
class FeedDocument:
    """
    A complete feed snapshot: channel metadata plus items in page order.

    WARNING: Never mutate a published document. Refreshes build a new one and swap it in.
    """
    title: str
    link: str
    description: str
    items: Tuple[NewsItem, ...] = ()
