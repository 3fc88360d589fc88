import re
from typing import Optional


def redact_secrets(text: str) -> str:
    """Redact common secret patterns from logs and error strings."""
    if not isinstance(text, str):
        return text

    redacted = text

    # Query params like apiKey=, apikey=, api_key=, key=, token=, secret=
    redacted = re.sub(r"(?i)(api[_-]?key|key|token|secret)=([^&\s]+)", r"\1=***REDACTED***", redacted)

    # Header style x-api-key: <value> or 'x-api-key': '<value>'
    redacted = re.sub(r"(?i)(x-api-key['\"]?\s*[:=]\s*['\"]?)([^'\"\s,}]+)", r"\1***REDACTED***", redacted)

    # Anthropic style keys anywhere in the text
    redacted = re.sub(r"sk-ant-[A-Za-z0-9_\-]+", "***REDACTED***", redacted)

    # Generic bearer tokens
    redacted = re.sub(r"(?i)Bearer\s+[A-Za-z0-9._\-]+", "Bearer ***REDACTED***", redacted)

    return redacted


def is_configured_key(value: Optional[str]) -> bool:
    """Return True if an env var-like key is configured (not empty or placeholder)."""
    if not value:
        return False
    s = value.strip()
    if not s:
        return False
    return ('YOUR_' not in s) and ('your_' not in s)
