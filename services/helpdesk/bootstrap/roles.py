"""Seed the built-in roles, their ordering, and the default role for new users."""
from __future__ import annotations

import logging
from typing import List

from accounts.grants import DEFAULT_ROLE_ORDER, DEFAULT_ROLES
from accounts.models import Role, RoleOrder
from configuration import keys
from configuration.models import Setting

from .exceptions import MissingPrerequisite
from .pipeline import BootstrapContext

logger = logging.getLogger(__name__)


def seed_roles(context: BootstrapContext) -> List[int]:
    """Create missing built-in roles, then the role order if none exists yet."""

    for definition in DEFAULT_ROLES:
        if Role.objects.filter(name=definition.name).exists():
            continue
        Role.objects.create(
            name=definition.name,
            description=definition.description,
            grants=list(definition.grants),
        )
        logger.info("Created role %s", definition.name)

    role_order = RoleOrder.load()
    if role_order is not None:
        return list(role_order.order)

    roles = Role.objects.in_bulk(list(DEFAULT_ROLE_ORDER), field_name="name")
    missing = [name for name in DEFAULT_ROLE_ORDER if name not in roles]
    if missing:
        raise MissingPrerequisite(f"Cannot build role order, missing roles: {', '.join(missing)}")

    role_order = RoleOrder.objects.create(order=[roles[name].id for name in DEFAULT_ROLE_ORDER])
    logger.info("Created role order %s", ", ".join(DEFAULT_ROLE_ORDER))
    return list(role_order.order)


def seed_default_user_role(context: BootstrapContext) -> int | None:
    """Point new users at the least privileged role in the role order.

    Does nothing until a role order exists.
    """

    role_order = RoleOrder.load()
    if role_order is None or not role_order.order:
        logger.warning("No role order found; default user role left unset")
        return None

    existing = Setting.objects.filter(name=keys.DEFAULT_USER_ROLE).first()
    if existing is not None:
        return existing.value

    setting = Setting.objects.create(name=keys.DEFAULT_USER_ROLE, value=role_order.order[-1])
    return setting.value
