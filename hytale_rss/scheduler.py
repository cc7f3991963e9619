"""Background refresh thread for the feed.

Runs one refresh as soon as it starts, then one per interval, strictly one at
a time. Request handlers never wait on it: they read whatever the FeedStore
currently holds.
"""
from __future__ import annotations

import logging
import math
import threading
import time
from enum import Enum
from typing import Optional

from .core import FeedRefresher
from .exceptions import FetchError, ParseError

logger = logging.getLogger(__name__)

REFRESH_INTERVAL_S = 3600.0


def next_deadline(started: float, now: float, interval_s: float) -> float:
    """
    First tick of the fixed cadence ``started + k * interval_s`` that lies after
    ``now``. Ticks missed while a refresh was running are skipped.
    """
    elapsed = max(0.0, now - started)
    return started + (math.floor(elapsed / interval_s) + 1) * interval_s


class RefreshState(Enum):
    IDLE = "idle"
    REFRESHING = "refreshing"


class RefreshScheduler:
    """Drives ``FeedRefresher.refresh`` from a daemon thread.

    Ticks fall on a fixed cadence counted from ``start()``, so refresh
    duration does not shift the schedule. Refreshes never overlap: ticks
    that pass while a refresh is still running are skipped and the next
    refresh waits for the following tick.

    Parameters
    ----------
    refresher : FeedRefresher
    interval_s : float
        Seconds between consecutive ticks.
    """

    def __init__(self, refresher: FeedRefresher, *, interval_s: float = REFRESH_INTERVAL_S) -> None:
        self._refresher = refresher
        self._interval_s = interval_s

        self._run_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        # Observable status
        self.state: RefreshState = RefreshState.IDLE
        self.refresh_count: int = 0
        self.failure_count: int = 0
        self.last_error: str = ""

    # ── Thread lifecycle ────────────────────────────────────

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def interval_s(self) -> float:
        return self._interval_s

    def start(self) -> None:
        """Start the refresh thread (idempotent)."""
        if self.is_alive:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop,
            name="feed-refresher",
            daemon=True,
        )
        self._thread.start()
        logger.info("Refresh scheduler started (interval=%.0fs)", self._interval_s)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the thread to exit and optionally wait for it."""
        self._stop_event.set()
        if timeout is not None and self._thread is not None:
            self._thread.join(timeout)

    # ── Refresh ─────────────────────────────────────────────

    def run_once(self, *, initial: bool = False) -> bool:
        """
        Run a single refresh. Returns True on success.

        Failures are logged and counted, never raised: the published feed stays
        as it was until a later refresh succeeds.
        """
        with self._run_lock:
            self.state = RefreshState.REFRESHING
            try:
                self._refresher.refresh()
            except (FetchError, ParseError) as exc:
                self._record_failure(exc)
                logger.warning("%s: %s", "Initial scrape failed" if initial else "Failed to update feed", exc)
                return False
            except Exception as exc:
                self._record_failure(exc)
                logger.exception("Unexpected error while refreshing feed")
                return False
            finally:
                self.state = RefreshState.IDLE

            self.refresh_count += 1
            self.last_error = ""
            if not initial:
                logger.info("Feed updated successfully")
            return True

    def _record_failure(self, exc: Exception) -> None:
        self.failure_count += 1
        self.last_error = str(exc)

    def _run_loop(self) -> None:
        started = time.monotonic()
        tick = started
        self.run_once(initial=True)
        while True:
            tick = next_deadline(started, max(time.monotonic(), tick), self._interval_s)
            if self._stop_event.wait(timeout=max(0.0, tick - time.monotonic())):
                break
            self.run_once()
        logger.info("Refresh scheduler exited")
