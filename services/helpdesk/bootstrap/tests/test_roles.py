"""Tests for seeding roles, the role order, and the default user role."""
from __future__ import annotations

from pathlib import Path
from unittest import mock

from django.test import TestCase

from accounts.grants import ADMIN_GRANTS, USER_GRANTS
from accounts.models import Role, RoleOrder
from bootstrap.exceptions import MissingPrerequisite
from bootstrap.pipeline import BootstrapContext
from bootstrap.roles import seed_default_user_role, seed_roles
from configuration import keys
from configuration.models import Setting


class SeedRolesTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def test_creates_roles_and_order(self) -> None:
        order = seed_roles(self.context)

        roles = Role.objects.in_bulk(["Admin", "Support", "User"], field_name="name")
        self.assertEqual(order, [roles["Admin"].id, roles["Support"].id, roles["User"].id])
        self.assertEqual(RoleOrder.load().order, order)
        self.assertEqual(roles["User"].grants, list(USER_GRANTS))
        self.assertEqual(roles["Admin"].grants, list(ADMIN_GRANTS))

    def test_is_idempotent(self) -> None:
        first = seed_roles(self.context)
        second = seed_roles(self.context)

        self.assertEqual(first, second)
        self.assertEqual(Role.objects.count(), 3)
        self.assertEqual(RoleOrder.objects.count(), 1)

    def test_existing_role_is_not_modified(self) -> None:
        Role.objects.create(name="Support", description="Tier one", grants=["tickets:view"])

        seed_roles(self.context)

        support = Role.objects.get(name="Support")
        self.assertEqual(support.description, "Tier one")
        self.assertEqual(support.grants, ["tickets:view"])

    def test_existing_order_is_kept(self) -> None:
        seed_roles(self.context)
        custom = list(reversed(RoleOrder.load().order))
        RoleOrder.objects.filter(pk=RoleOrder.SINGLETON_ID).update(order=custom)

        self.assertEqual(seed_roles(self.context), custom)

    def test_order_needs_every_builtin_role(self) -> None:
        with mock.patch.object(Role.objects, "in_bulk", return_value={}):
            with self.assertRaises(MissingPrerequisite):
                seed_roles(self.context)

        self.assertIsNone(RoleOrder.load())


class SeedDefaultUserRoleTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def test_without_role_order_creates_nothing(self) -> None:
        with self.assertLogs("bootstrap.roles", level="WARNING"):
            self.assertIsNone(seed_default_user_role(self.context))

        self.assertFalse(Setting.objects.filter(name=keys.DEFAULT_USER_ROLE).exists())

    def test_uses_last_role_in_order(self) -> None:
        seed_roles(self.context)

        value = seed_default_user_role(self.context)

        self.assertEqual(value, Role.objects.get(name="User").id)
        self.assertEqual(Setting.get_value(keys.DEFAULT_USER_ROLE), value)

    def test_existing_setting_is_kept(self) -> None:
        seed_roles(self.context)
        support = Role.objects.get(name="Support")
        Setting.objects.create(name=keys.DEFAULT_USER_ROLE, value=support.id)

        self.assertEqual(seed_default_user_role(self.context), support.id)
        self.assertEqual(Setting.objects.filter(name=keys.DEFAULT_USER_ROLE).count(), 1)
