"""
HTTP surface for the Hytale news feed.

Endpoints:
- GET /          -> static landing page
- GET /feed.xml  -> current feed as RSS 2.0 (503 until the first refresh succeeds)

Usage:
    python run_server.py
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from .config import Config
from .core import FeedRefresher
from .feed import render_rss
from .scheduler import RefreshScheduler
from .store import FeedStore

logger = logging.getLogger(__name__)

LANDING_PAGE = (
    "<html><body><h1>Hytale News RSS Feed</h1>"
    '<p>Access the feed at: <a href="/feed.xml">/feed.xml</a></p>'
    "</body></html>"
)

router = APIRouter()


def _get_store(request: Request) -> FeedStore:
    store = getattr(request.app.state, "feed_store", None)
    if store is None:
        raise RuntimeError("feed_store not configured")
    return store


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    return HTMLResponse(LANDING_PAGE)


@router.get("/feed.xml")
async def serve_feed(request: Request) -> Response:
    feed = _get_store(request).get()
    if feed is None:
        return PlainTextResponse("Feed not ready yet", status_code=503)

    try:
        body = render_rss(feed)
    except Exception:
        logger.exception("Failed to generate feed")
        return PlainTextResponse("Failed to generate feed", status_code=500)
    return Response(content=body, media_type="application/xml")


@asynccontextmanager
async def lifespan(app: FastAPI):
    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None:
        scheduler.start()
    yield
    if scheduler is not None:
        scheduler.stop()


def create_app(store: FeedStore, scheduler: Optional[RefreshScheduler] = None) -> FastAPI:
    """
    Build the FastAPI app around an existing store.

    When a scheduler is given it starts with the app and is stopped on shutdown.
    """
    app = FastAPI(title="Hytale News RSS", lifespan=lifespan)
    app.state.feed_store = store
    app.state.scheduler = scheduler
    app.include_router(router)
    return app


def build_app(config: Optional[Config] = None) -> FastAPI:
    """Production wiring: one store, one refresher, one hourly scheduler."""
    cfg = config or Config()
    store = FeedStore()
    refresher = FeedRefresher(store, timeout_sec=cfg.fetch_timeout_s)
    return create_app(store, RefreshScheduler(refresher))
