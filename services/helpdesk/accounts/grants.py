"""Default grant sets for the built-in roles.

A grant string scopes verbs to a resource: ``"<resource>:<verb> <verb>..."``,
or ``"<resource>:*"`` for every verb. Evaluation happens in the permission
layer; these lists are only what a fresh installation starts with.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

USER_GRANTS: Tuple[str, ...] = (
    "tickets:create view update",
    "comments:create view update",
)

SUPPORT_GRANTS: Tuple[str, ...] = (
    "tickets:*",
    "agent:*",
    "accounts:create update view import",
    "teams:create update view",
    "comments:create view update create delete",
    "reports:view create",
    "notices:*",
)

ADMIN_GRANTS: Tuple[str, ...] = (
    "admin:*",
    "agent:*",
    "chat:*",
    "tickets:*",
    "accounts:*",
    "groups:*",
    "teams:*",
    "departments:*",
    "comments:*",
    "reports:*",
    "notices:*",
    "settings:*",
    "api:*",
)


@dataclass(frozen=True)
class RoleDefinition:
    name: str
    description: str
    grants: Tuple[str, ...]


USER = RoleDefinition("User", "Default role for users", USER_GRANTS)
SUPPORT = RoleDefinition("Support", "Default role for agents", SUPPORT_GRANTS)
ADMIN = RoleDefinition("Admin", "Default role for admins", ADMIN_GRANTS)

DEFAULT_ROLES: Tuple[RoleDefinition, ...] = (USER, SUPPORT, ADMIN)

# Most privileged first.
DEFAULT_ROLE_ORDER: Tuple[str, ...] = (ADMIN.name, SUPPORT.name, USER.name)

