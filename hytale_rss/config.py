"""Process configuration for the feed server.

The source URL, refresh schedule and listen address are fixed. Only the
operational knobs below come from environment variables (a local ``.env``
is loaded by ``run_server.py``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .fetcher import DEFAULT_TIMEOUT_SEC

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8080


def _env_float(key: str, default: float) -> float:
    """Read an env var as float, returning *default* on parse failure."""
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass(frozen=True)
class Config:
    """One instance per process. Environment is read at instantiation time."""

    host: str = LISTEN_HOST
    port: int = LISTEN_PORT

    # Upper bound for one upstream fetch; an unbounded hang would stall the scheduler
    fetch_timeout_s: float = field(default_factory=lambda: _env_float("HYTALE_RSS_FETCH_TIMEOUT_S", DEFAULT_TIMEOUT_SEC))

    log_level: str = field(default_factory=lambda: os.getenv("HYTALE_RSS_LOG_LEVEL", "INFO").upper())
