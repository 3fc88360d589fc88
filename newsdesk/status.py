"""
Status payload for the health endpoint.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from newsdesk.models import HealthStatus
from newsdesk.refresh import RefreshJob


def _health_to_dict(status: HealthStatus) -> Dict[str, Any]:
    return {
        "name": status.name,
        "healthy": status.healthy,
        "last_error": status.last_error,
        "last_success": status.last_success.isoformat() if status.last_success else None,
        "items_last_fetch": status.items_last_fetch,
        "latency_ms": status.latency_ms,
    }


def build_status(job: RefreshJob) -> Dict[str, Any]:
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "store": job.store.describe(),
        "generator": job.generator.kind.value,
        "source": _health_to_dict(job.source.last_status),
    }
