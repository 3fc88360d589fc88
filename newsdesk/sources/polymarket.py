"""
Market source backed by the Polymarket Gamma API.
"""
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional

from newsdesk.http_client import HttpClient
from newsdesk.models import HealthStatus, Market

logger = logging.getLogger(__name__)


class PolymarketSource:
    """
    Fetches a bounded list of open markets.

    ``fetch_markets`` returns an empty list on any failure and remembers the
    outcome of the last call in ``last_status``.
    """

    name = "polymarket"

    def __init__(self, markets_url: str, limit: int = 20, http: Optional[HttpClient] = None) -> None:
        self.markets_url = markets_url
        self.limit = limit
        self.http = http or HttpClient()
        self.last_status = HealthStatus(name=self.name, healthy=False)

    def fetch_markets(self) -> List[Market]:
        start = time.time()
        params = {"limit": self.limit, "closed": "false"}
        payload = self.http.get(self.markets_url, params=params)
        latency_ms = (time.time() - start) * 1000

        if payload is None:
            return self._fail("request failed", latency_ms)
        if not isinstance(payload, list):
            return self._fail(f"unexpected response type {type(payload).__name__}", latency_ms)

        markets = [Market.from_payload(entry) for entry in payload if isinstance(entry, dict)]
        logger.info("Fetched %d markets from %s", len(markets), self.name)
        self.last_status = HealthStatus(
            name=self.name,
            healthy=True,
            last_success=datetime.now(timezone.utc),
            items_last_fetch=len(markets),
            latency_ms=latency_ms,
        )
        return markets

    def _fail(self, reason: str, latency_ms: float) -> List[Market]:
        logger.error("Error fetching Polymarket data: %s", reason)
        self.last_status = HealthStatus(
            name=self.name,
            healthy=False,
            last_error=reason,
            last_success=self.last_status.last_success,
            latency_ms=latency_ms,
        )
        return []
