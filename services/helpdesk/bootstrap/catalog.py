"""Seed built-in ticket statuses and priorities, and tidy ticket types and tags."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from django.db import transaction
from django.db.models import F

from tickets.models import Priority, TicketStatus, TicketTag, TicketType, normalize_tag

from .pipeline import BootstrapContext

logger = logging.getLogger(__name__)

BUILTIN_STATUSES: Tuple[Dict[str, Any], ...] = (
    {"name": "New", "html_color": "#29b955", "uid": 0, "order": 0, "slatimer": False, "is_resolved": False},
    {"name": "Open", "html_color": "#d32f2f", "uid": 1, "order": 1, "slatimer": True, "is_resolved": False},
    {"name": "Pending", "html_color": "#2196F3", "uid": 2, "order": 2, "slatimer": False, "is_resolved": False},
    {"name": "Closed", "html_color": "#CCCCCC", "uid": 3, "order": 3, "slatimer": False, "is_resolved": True},
)

BUILTIN_PRIORITIES: Tuple[Dict[str, Any], ...] = (
    {"name": "Normal", "migration_num": 1, "html_color": "#29b955"},
    {"name": "Urgent", "migration_num": 2, "html_color": "#8e24aa"},
    {"name": "Critical", "migration_num": 3, "html_color": "#e65100"},
)


def seed_ticket_statuses(context: BootstrapContext) -> List[str]:
    created: List[str] = []
    for definition in BUILTIN_STATUSES:
        exists = TicketStatus.objects.filter(
            name=definition["name"], uid=definition["uid"], is_locked=True
        ).exists()
        if exists:
            continue
        with transaction.atomic():
            TicketStatus.objects.create(is_locked=True, **definition)
        created.append(definition["name"])
    if created:
        logger.info("Created ticket statuses: %s", ", ".join(created))
    return created


def seed_priorities(context: BootstrapContext) -> List[str]:
    created: List[str] = []
    for definition in BUILTIN_PRIORITIES:
        if Priority.objects.filter(migration_num=definition["migration_num"]).exists():
            continue
        with transaction.atomic():
            Priority.objects.create(is_default=True, **definition)
        created.append(definition["name"])
    if created:
        logger.info("Created priorities: %s", ", ".join(created))
    return created


def backfill_ticket_type_priorities(context: BootstrapContext) -> List[str]:
    """Give every ticket type without priorities the default ones.

    Types that already have at least one priority are left alone.
    """

    defaults = list(
        Priority.objects.filter(is_default=True)
        .order_by(F("migration_num").asc(nulls_last=True), "name")
        .values_list("id", flat=True)
    )
    if not defaults:
        return []

    updated: List[str] = []
    for ticket_type in TicketType.objects.filter(priorities__isnull=True).distinct():
        ticket_type.priorities.add(*defaults)
        updated.append(ticket_type.name)
    if updated:
        logger.info("Added default priorities to ticket types: %s", ", ".join(updated))
    return updated


def normalize_tags(context: BootstrapContext) -> int:
    """Re-save tags whose stored name or normalized form is out of date."""

    changed = 0
    for tag in TicketTag.objects.all().iterator():
        if tag.name == tag.name.strip() and tag.normalized == normalize_tag(tag.name):
            continue
        tag.save(update_fields=["name", "normalized"])
        changed += 1
    if changed:
        logger.info("Normalized %s tag(s)", changed)
    return changed
