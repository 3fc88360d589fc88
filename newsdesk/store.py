"""
In-memory holder of the currently published articles.

The refresh job is the only writer; request handlers read snapshots.
"""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from newsdesk.models import Article, normalize_article_id


class ArticleStore:
    def __init__(self) -> None:
        self._articles: Tuple[Article, ...] = ()
        self._lock = threading.Lock()
        self.last_refreshed_at: Optional[datetime] = None
        self.refresh_count = 0

    def snapshot(self) -> Tuple[Article, ...]:
        with self._lock:
            return self._articles

    def replace(self, articles: Iterable[Article]) -> None:
        """Swap in a complete new sequence; the previous one is discarded as a whole."""
        new_articles = tuple(articles)
        with self._lock:
            self._articles = new_articles
            self.last_refreshed_at = datetime.now(timezone.utc)
            self.refresh_count += 1

    def find(self, article_id: Any) -> Optional[Article]:
        key = normalize_article_id(article_id)
        for article in self.snapshot():
            if normalize_article_id(article.id) == key:
                return article
        return None

    def __len__(self) -> int:
        return len(self.snapshot())

    def describe(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "articles": len(self._articles),
                "last_refreshed_at": self.last_refreshed_at.isoformat() if self.last_refreshed_at else None,
                "refresh_count": self.refresh_count,
            }
