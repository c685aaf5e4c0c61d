"""The ordered startup bootstrap and its entry points.

Every step is idempotent, so the whole sequence is rerun from the start on
each process start. A failing step stops the sequence; the next start picks
up where the data left off.
"""
from __future__ import annotations

import logging
from typing import Callable, Tuple

from .catalog import (
    backfill_ticket_type_priorities,
    normalize_tags,
    seed_priorities,
    seed_ticket_statuses,
)
from .defaults import (
    seed_default_ticket_type,
    seed_installation_id,
    seed_mail_templates,
    seed_maintenance_mode,
    seed_search_engine_settings,
    seed_timezone,
)
from .exceptions import BootstrapError
from .filesystem import ensure_directories, provision_backup_tools
from .legacy import migrate_legacy_priorities
from .pipeline import BootstrapContext, BootstrapReport, Pipeline, Step
from .roles import seed_default_user_role, seed_roles

logger = logging.getLogger(__name__)

STEPS: Tuple[Step, ...] = (
    Step("ensure_directories", ensure_directories),
    Step("provision_backup_tools", provision_backup_tools),
    Step("seed_roles", seed_roles),
    Step("seed_default_user_role", seed_default_user_role),
    Step("seed_timezone", seed_timezone),
    Step("seed_default_ticket_type", seed_default_ticket_type),
    Step("seed_ticket_statuses", seed_ticket_statuses),
    Step("seed_priorities", seed_priorities),
    Step("backfill_ticket_type_priorities", backfill_ticket_type_priorities),
    Step("migrate_legacy_priorities", migrate_legacy_priorities),
    Step("normalize_tags", normalize_tags),
    Step("seed_mail_templates", seed_mail_templates),
    Step("seed_search_engine_settings", seed_search_engine_settings),
    Step("seed_maintenance_mode", seed_maintenance_mode),
    Step("seed_installation_id", seed_installation_id),
)


def run(context: BootstrapContext | None = None) -> BootstrapReport:
    """Run every step in order; raises :class:`StepFailed` at the first failure."""

    logger.info("Checking default settings...")
    return Pipeline(STEPS).run(context or BootstrapContext.from_settings())


def init(
    on_complete: Callable[[BootstrapReport], None] | None = None,
    *,
    context: BootstrapContext | None = None,
) -> BootstrapReport:
    """Bootstrap at process start without ever blocking startup.

    Failures are logged, not raised. ``on_complete`` is called exactly once
    with the report, whether or not a step failed.
    """

    report = BootstrapReport()
    try:
        logger.info("Checking default settings...")
        Pipeline(STEPS).run(context or BootstrapContext.from_settings(), report=report)
    except BootstrapError as exc:
        logger.warning("Bootstrap stopped: %s", exc)
    except Exception as exc:  # pragma: no cover - configuration errors before any step runs
        logger.exception("Bootstrap could not start")
        report.error = exc
    else:
        logger.info("Bootstrap complete (%s steps)", len(report.completed))

    if on_complete is not None:
        on_complete(report)
    return report
