from __future__ import annotations

import threading
from typing import Optional

from .models import FeedDocument


class FeedStore:
    """
    Holds the currently published FeedDocument, or None before the first refresh.

    The lock only guards the reference itself: writers hold it for the swap,
    readers for the copy. Building and serializing documents happens outside it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._feed: Optional[FeedDocument] = None

    def get(self) -> Optional[FeedDocument]:
        with self._lock:
            return self._feed

    def replace(self, feed: FeedDocument) -> None:
        with self._lock:
            self._feed = feed
