"""
Public API for the Polymarket Times newsdesk.
"""
from __future__ import annotations

from typing import Optional

from newsdesk.generators import select_generator
from newsdesk.http_client import HttpClient
from newsdesk.refresh import RefreshJob
from newsdesk.settings import NewsdeskSettings, load_settings
from newsdesk.sources.polymarket import PolymarketSource
from newsdesk.store import ArticleStore


def build_newsdesk(settings: Optional[NewsdeskSettings] = None, store: Optional[ArticleStore] = None) -> RefreshJob:
    """
    Wire source, generator and store from settings.

    The generator strategy is decided here, once per process.
    """
    settings = settings or load_settings()
    source = PolymarketSource(
        markets_url=settings.markets_url,
        limit=settings.market_limit,
        http=HttpClient(timeout=settings.http_timeout),
    )
    return RefreshJob(
        source=source,
        generator=select_generator(settings),
        store=store or ArticleStore(),
        articles_per_refresh=settings.articles_per_refresh,
        max_workers=settings.generation_workers,
    )
