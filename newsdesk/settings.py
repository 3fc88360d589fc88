"""
Centralised settings for the newsdesk (env-first, read once at startup).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from utils.config import get_int_env, get_str_env
from utils.security import is_configured_key

DEFAULT_MARKETS_URL = "https://gamma-api.polymarket.com/markets"
DEFAULT_ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"
ANTHROPIC_VERSION = "2023-06-01"


@dataclass
class NewsdeskSettings:
    markets_url: str = DEFAULT_MARKETS_URL
    market_limit: int = 20
    articles_per_refresh: int = 15
    refresh_cron: str = "0 * * * *"
    generation_workers: int = 8
    http_timeout: int = 30
    anthropic_api_key: Optional[str] = None
    anthropic_url: str = DEFAULT_ANTHROPIC_URL
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    anthropic_max_tokens: int = 1024
    log_dir: Path = Path("logs")

    @property
    def use_ai(self) -> bool:
        return is_configured_key(self.anthropic_api_key)


def load_settings() -> NewsdeskSettings:
    return NewsdeskSettings(
        markets_url=get_str_env("NEWSDESK_MARKETS_URL", DEFAULT_MARKETS_URL),
        market_limit=get_int_env("NEWSDESK_MARKET_LIMIT", 20),
        articles_per_refresh=get_int_env("NEWSDESK_ARTICLE_LIMIT", 15),
        refresh_cron=get_str_env("NEWSDESK_REFRESH_CRON", "0 * * * *"),
        generation_workers=get_int_env("NEWSDESK_GENERATION_WORKERS", 8),
        http_timeout=get_int_env("NEWSDESK_HTTP_TIMEOUT", 30),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        anthropic_model=get_str_env("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL),
        log_dir=Path(get_str_env("NEWSDESK_LOG_DIR", "logs")),
    )
