"""
APScheduler wiring for the periodic refresh.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from newsdesk.refresh import RefreshJob
from newsdesk.settings import NewsdeskSettings

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "refresh_articles"


def build_scheduler(job: RefreshJob, settings: NewsdeskSettings) -> BackgroundScheduler:
    """
    Scheduler with a single cron job that also fires once as soon as it starts.

    ``max_instances=1`` drops ticks that arrive while a cycle is still running.
    """
    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        job.run,
        CronTrigger.from_crontab(settings.refresh_cron, timezone="UTC"),
        id=REFRESH_JOB_ID,
        max_instances=1,
        coalesce=True,
        next_run_time=datetime.now(timezone.utc),
    )
    logger.info("Scheduled article refresh with cron '%s'", settings.refresh_cron)
    return scheduler
