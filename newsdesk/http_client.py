"""
HTTP helper shared by the market source and the article generator.

One attempt per call: failures are logged and reported as ``None``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from utils.security import redact_secrets

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, timeout: int = 30, user_agent: str | None = None):
        self.timeout = timeout
        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(max_retries=0)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        headers = {
            "User-Agent": user_agent or "PolymarketTimes-Newsdesk/1.0",
            "Accept": "application/json",
        }
        self.session.headers.update(headers)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            if resp.status_code == 200:
                return resp.json()
            logger.warning("HTTP GET %s failed %s %s", url, resp.status_code, redact_secrets(resp.text[:200]))
        except Exception as exc:
            logger.error("HTTP GET %s exception %s", url, redact_secrets(str(exc)))
        return None

    def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[Any]:
        try:
            resp = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
            if resp.status_code == 200:
                return resp.json()
            logger.warning("HTTP POST %s failed %s %s", url, resp.status_code, redact_secrets(resp.text[:200]))
        except Exception as exc:
            logger.error("HTTP POST %s exception %s", url, redact_secrets(str(exc)))
        return None
