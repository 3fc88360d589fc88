"""
One refresh cycle: fetch markets, generate articles, publish them.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List

from newsdesk.generators import ArticleGenerator
from newsdesk.models import Article
from newsdesk.sources.polymarket import PolymarketSource
from newsdesk.store import ArticleStore

logger = logging.getLogger(__name__)


class RefreshJob:
    """
    Runs refresh cycles against a single store.

    A cycle started while another is still running is skipped.
    """

    def __init__(
        self,
        source: PolymarketSource,
        generator: ArticleGenerator,
        store: ArticleStore,
        articles_per_refresh: int = 15,
        max_workers: int = 8,
    ) -> None:
        self.source = source
        self.generator = generator
        self.store = store
        self.articles_per_refresh = articles_per_refresh
        self.max_workers = max_workers
        self._running = threading.Lock()

    def run(self) -> int:
        """Return the number of articles published, 0 when the store was left untouched."""
        if not self._running.acquire(blocking=False):
            logger.warning("Refresh already in progress; skipping this cycle")
            return 0
        try:
            return self._run_cycle()
        finally:
            self._running.release()

    def _run_cycle(self) -> int:
        logger.info("Fetching latest Polymarket data...")
        markets = self.source.fetch_markets()
        if not markets:
            logger.warning("No markets fetched; keeping %d existing articles", len(self.store))
            return 0

        selected = markets[: self.articles_per_refresh]
        workers = max(1, min(self.max_workers, len(selected)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="newsdesk-generate") as executor:
            # map() yields in submission order, not completion order
            articles: List[Article] = list(executor.map(self.generator.generate, selected))

        self.store.replace(articles)
        logger.info("Updated %d articles", len(articles))
        return len(articles)
