"""Background tasks for the bootstrap app."""
from __future__ import annotations

import logging
from typing import Any, Dict

from celery import shared_task

from .orchestrator import init

logger = logging.getLogger(__name__)


@shared_task
def run_bootstrap() -> Dict[str, Any]:
    """Rerun the startup bootstrap, e.g. after restoring a backup."""

    report = init()
    if not report.ok:
        logger.warning("Queued bootstrap stopped at %s", report.failed_step)
    return report.as_dict()
