"""
Article generation strategies.

The strategy is picked once at startup by ``select_generator`` and injected
into the refresh job; it is never re-evaluated per market.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from newsdesk.http_client import HttpClient
from newsdesk.models import Article, GeneratorKind, Market
from newsdesk.settings import ANTHROPIC_VERSION, NewsdeskSettings
from utils.security import redact_secrets

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Write a concise news article (150-200 words) about this prediction market:

Question: "{question}"
Current Probability: {probability}%
Category: {category}

Write it as a news article analyzing what this prediction market tells us about future events. \
Keep it objective and informative. Don't use phrases like "prediction market shows" - just report on the event itself."""


class ArticleGenerator(Protocol):
    kind: GeneratorKind

    def generate(self, market: Market) -> Article:
        ...


class PlainArticleGenerator:
    """Derives the article from the market's own fields. No I/O."""

    kind = GeneratorKind.PLAIN

    def generate(self, market: Market) -> Article:
        return Article.from_market(market)


class AnthropicArticleGenerator:
    """
    Summarises a market through the Anthropic Messages API.

    Any failure of the remote call falls back to ``PlainArticleGenerator`` for
    that market, so ``generate`` always returns a complete article.
    """

    kind = GeneratorKind.AI

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        model: str,
        max_tokens: int = 1024,
        http: Optional[HttpClient] = None,
        fallback: Optional[PlainArticleGenerator] = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.model = model
        self.max_tokens = max_tokens
        self.http = http or HttpClient()
        self.fallback = fallback or PlainArticleGenerator()

    def build_prompt(self, market: Market) -> str:
        return PROMPT_TEMPLATE.format(
            question=market.question or "",
            probability=market.probability,
            category=market.category or "General",
        )

    def generate(self, market: Market) -> Article:
        try:
            summary = self._request_summary(market)
        except Exception as exc:
            logger.error("Error generating AI article for market %s: %s", market.id, redact_secrets(str(exc)))
            summary = None
        if summary is None:
            return self.fallback.generate(market)
        return Article.from_market(market, summary=summary)

    def _request_summary(self, market: Market) -> Optional[str]:
        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": self.build_prompt(market)}],
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        data = self.http.post_json(self.endpoint, payload, headers=headers)
        if data is None:
            logger.error("Error generating AI article for market %s: request failed", market.id)
            return None
        text = _first_text_block(data)
        if text is None:
            logger.error("Error generating AI article for market %s: malformed response", market.id)
        return text


def _first_text_block(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    content = data.get("content")
    if not isinstance(content, list) or not content:
        return None
    first = content[0]
    if not isinstance(first, dict):
        return None
    text = first.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text


def select_generator(settings: NewsdeskSettings) -> ArticleGenerator:
    if settings.use_ai:
        logger.info("ANTHROPIC_API_KEY configured; using AI summaries (%s)", settings.anthropic_model)
        return AnthropicArticleGenerator(
            api_key=settings.anthropic_api_key or "",
            endpoint=settings.anthropic_url,
            model=settings.anthropic_model,
            max_tokens=settings.anthropic_max_tokens,
            http=HttpClient(timeout=settings.http_timeout),
        )
    logger.info("ANTHROPIC_API_KEY missing; using plain summaries")
    return PlainArticleGenerator()
