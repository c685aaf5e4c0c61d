"""Seed installation-wide settings and mail templates."""
from __future__ import annotations

import json
import logging
import uuid
from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from configuration import keys
from configuration.models import MailTemplate, Setting
from tickets.models import TicketType

from .pipeline import BootstrapContext, fan_out

logger = logging.getLogger(__name__)

MAIL_TEMPLATE_DIR = Path(__file__).resolve().parent / "mail_templates"


def create_setting_if_missing(name: str, value: Any) -> bool:
    """Create ``name`` with ``value`` unless it already exists; never overwrites."""

    if Setting.objects.filter(name=name).exists():
        return False
    Setting.objects.create(name=name, value=value)
    logger.debug("Created setting %s", name)
    return True


def _is_known_timezone(name: Any) -> bool:
    if not isinstance(name, str) or not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def seed_timezone(context: BootstrapContext) -> str:
    """Ensure a timezone setting exists and return the zone the installation uses."""

    create_setting_if_missing(keys.TIMEZONE, context.default_timezone)
    timezone_name = Setting.get_value(keys.TIMEZONE)
    if not _is_known_timezone(timezone_name):
        logger.warning(
            "Unknown timezone %r in settings; using %s", timezone_name, context.default_timezone
        )
        timezone_name = context.default_timezone
    logger.debug("Timezone set to %s", timezone_name)
    return timezone_name


def seed_default_ticket_type(context: BootstrapContext) -> int | None:
    existing = Setting.objects.filter(name=keys.DEFAULT_TICKET_TYPE).first()
    if existing is not None:
        return existing.value

    ticket_type = TicketType.objects.order_by("name").first()
    if ticket_type is None:
        logger.warning("No ticket types exist; default ticket type left unset")
        return None

    Setting.objects.create(name=keys.DEFAULT_TICKET_TYPE, value=ticket_type.id)
    return ticket_type.id


def load_mail_templates() -> List[Dict[str, Any]]:
    return [
        json.loads(path.read_text(encoding="utf-8"))
        for path in sorted(MAIL_TEMPLATE_DIR.glob("*.json"))
    ]


def _create_template_if_missing(template: Dict[str, Any]) -> bool:
    if MailTemplate.objects.filter(name=template["name"]).exists():
        return False
    MailTemplate.objects.create(**template)
    logger.info("Created mail template %s", template["name"])
    return True


def seed_mail_templates(context: BootstrapContext) -> Dict[str, bool]:
    return fan_out(
        "seed_mail_templates",
        [
            (template["name"], partial(_create_template_if_missing, template))
            for template in load_mail_templates()
        ],
        max_workers=context.max_workers,
    )


def seed_search_engine_settings(context: BootstrapContext) -> Dict[str, bool]:
    """Copy the search engine configuration into the settings store."""

    config = context.elasticsearch
    candidates: List[Tuple[str, Any]] = [
        (keys.SEARCH_ENABLE, bool(config.get("enable", False))),
        (keys.SEARCH_HOST, config.get("host") or "localhost"),
    ]
    port = config.get("port")
    if port:
        candidates.append((keys.SEARCH_PORT, int(port)))

    return fan_out(
        "seed_search_engine_settings",
        [(name, partial(create_setting_if_missing, name, value)) for name, value in candidates],
        max_workers=context.max_workers,
    )


def seed_maintenance_mode(context: BootstrapContext) -> bool:
    return create_setting_if_missing(keys.MAINTENANCE_MODE, False)


def seed_installation_id(context: BootstrapContext) -> str:
    create_setting_if_missing(keys.INSTALLATION_ID, str(uuid.uuid4()))
    return Setting.get_value(keys.INSTALLATION_ID)
