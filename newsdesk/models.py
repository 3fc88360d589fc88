"""
Core data structures: the upstream prediction market and the article built from it.
"""
from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Politics"
DEFAULT_IMAGE = "https://via.placeholder.com/800x400"
MARKET_EVENT_BASE_URL = "https://polymarket.com/event"
PROBABILITY_NOT_AVAILABLE = "N/A"
SUMMARY_TEMPLATE = "Analysis of the prediction market: {question}"


class GeneratorKind(str, Enum):
    AI = "ai"
    PLAIN = "plain"


def normalize_article_id(value: Any) -> str:
    """
    Common string form for stored ids and lookup keys.

    ``1``, ``1.0``, ``"1"``, ``"1.0"`` and ``"01"`` all normalize to ``"1"``
    so a path parameter matches a numeric market id.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    text = str(value).strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        return text
    # Bounded exponent keeps int() cheap for hostile path values like "1e999999"
    if number.is_finite() and number.adjusted() < 40 and number == number.to_integral_value():
        return str(int(number))
    return text


def _timestamp_id() -> str:
    return str(int(time.time() * 1000))


def _parse_outcome_prices(raw: Any) -> List[str]:
    # The Gamma API encodes the list as a JSON string, e.g. '["0.73", "0.27"]'.
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    if isinstance(raw, (list, tuple)):
        return [str(price) for price in raw if price is not None]
    return []


def _parse_volume(raw: Any) -> Union[int, float]:
    if isinstance(raw, bool) or raw is None:
        return 0
    numeric = isinstance(raw, (int, float))
    try:
        value = float(raw if numeric else str(raw).strip())
    except (ValueError, OverflowError):
        return 0
    if not math.isfinite(value):
        return 0
    return raw if numeric else value


def _text_or_none(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw)
    return text if text.strip() else None


def format_probability(price: Optional[str]) -> str:
    """Primary outcome price as a one-decimal percentage string, or ``"N/A"``."""
    if price is None:
        return PROBABILITY_NOT_AVAILABLE
    try:
        value = float(str(price).strip())
    except ValueError:
        return PROBABILITY_NOT_AVAILABLE
    if not math.isfinite(value) or value < 0 or value > 1:
        return PROBABILITY_NOT_AVAILABLE
    return f"{value * 100:.1f}"


@dataclass
class Market:
    """
    Prediction market as returned by the Gamma ``/markets`` endpoint.

    Every field is optional; ``from_payload`` never raises for a dict input.
    """

    id: Optional[str] = None
    question: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    outcome_prices: List[str] = field(default_factory=list)
    volume: Union[int, float] = 0
    image: Optional[str] = None
    slug: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Market":
        market_id = payload.get("id")
        return cls(
            id=normalize_article_id(market_id) if market_id not in (None, "") else None,
            question=_text_or_none(payload.get("question")),
            description=_text_or_none(payload.get("description")),
            category=_text_or_none(payload.get("category")),
            outcome_prices=_parse_outcome_prices(payload.get("outcomePrices")),
            volume=_parse_volume(payload.get("volume")),
            image=_text_or_none(payload.get("image")),
            slug=_text_or_none(payload.get("slug")),
            raw=dict(payload),
        )

    @property
    def probability(self) -> str:
        return format_probability(self.outcome_prices[0] if self.outcome_prices else None)


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    summary: str
    category: str
    probability: str
    volume: Union[int, float]
    image: str
    created_at: datetime
    market_url: str

    @classmethod
    def from_market(cls, market: Market, summary: Optional[str] = None) -> "Article":
        """
        Build an article using the default rules for every field.

        ``summary`` overrides the description-derived text (used for AI summaries).
        """
        article_id = market.id or _timestamp_id()
        question = market.question or ""
        if summary is None:
            summary = market.description or SUMMARY_TEMPLATE.format(question=question)
        return cls(
            id=article_id,
            title=question,
            summary=summary,
            category=market.category or DEFAULT_CATEGORY,
            probability=market.probability,
            volume=market.volume,
            image=market.image or DEFAULT_IMAGE,
            created_at=datetime.now(timezone.utc),
            market_url=f"{MARKET_EVENT_BASE_URL}/{market.slug or article_id}",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "category": self.category,
            "probability": self.probability,
            "volume": self.volume,
            "image": self.image,
            "createdAt": self.created_at.isoformat(),
            "marketUrl": self.market_url,
        }


@dataclass
class HealthStatus:
    name: str
    healthy: bool
    last_error: Optional[str] = None
    last_success: Optional[datetime] = None
    items_last_fetch: int = 0
    latency_ms: Optional[float] = None
