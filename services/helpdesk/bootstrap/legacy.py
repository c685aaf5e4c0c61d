"""Rewrite tickets that still carry a numeric priority to point at a Priority."""
from __future__ import annotations

import logging
from functools import partial
from typing import Dict, Tuple

from tickets.models import Priority, Ticket

from .exceptions import MissingPrerequisite
from .pipeline import BootstrapContext, fan_out

logger = logging.getLogger(__name__)

LEGACY_PRIORITY_VALUES: Tuple[int, ...] = (1, 2, 3)


def count_legacy_tickets() -> Dict[int, int]:
    return {
        value: Ticket.objects.filter(legacy_priority=value).count()
        for value in LEGACY_PRIORITY_VALUES
    }


def migrate_legacy_value(value: int) -> int:
    """Point every ticket with ``legacy_priority == value`` at the matching priority."""

    priority = Priority.objects.filter(migration_num=value).first()
    if priority is None:
        raise MissingPrerequisite(f"No priority with migration number {value}")
    logger.info("Converting legacy priority %s to %s", value, priority.name)
    return Ticket.objects.filter(legacy_priority=value).update(
        priority=priority, legacy_priority=None
    )


def migrate_legacy_priorities(context: BootstrapContext) -> Dict[int, int]:
    """Migrate each legacy value that still has tickets.

    Values are migrated independently; a missing priority for one value does
    not stop the others.
    """

    pending = [value for value, count in count_legacy_tickets().items() if count > 0]
    if not pending:
        return {}

    results = fan_out(
        "migrate_legacy_priorities",
        [(f"priority={value}", partial(migrate_legacy_value, value)) for value in pending],
        max_workers=context.max_workers,
    )
    return {value: results[f"priority={value}"] for value in pending}
