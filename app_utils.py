"""Utility functions for Polymarket Times."""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_dir: Path, level: int = logging.INFO) -> None:
    """Send log records to ``<log_dir>/polymarket_times.log`` and stderr."""
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_dir / 'polymarket_times.log'),
            logging.StreamHandler()
        ]
    )


def get_env(name: str, default: str) -> str:
    """Get environment variable, treating a blank value as unset.

    Args:
        name: Environment variable name.
        default: Default value if variable is not set.

    Returns:
        The environment variable value or default.
    """
    env_value = os.getenv(name)
    if env_value is None or not env_value.strip():
        return default
    return env_value.strip()


def format_volume(value: Union[int, float, None]) -> str:
    """Compact dollar amount, e.g. ``$1.2M``."""
    amount = float(value or 0)
    for threshold, suffix in ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K")):
        if abs(amount) >= threshold:
            return f"${amount / threshold:.1f}{suffix}"
    return f"${amount:,.0f}"


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.astimezone(timezone.utc).strftime("%b %d, %Y %H:%M UTC")
