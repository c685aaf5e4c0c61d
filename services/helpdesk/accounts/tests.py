"""Tests for the role listing."""
from __future__ import annotations

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from .models import Role, RoleOrder


class RoleApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.user = Role.objects.create(name="User")
        self.admin = Role.objects.create(name="Admin", grants=["admin:*"])
        self.support = Role.objects.create(name="Support")

    def test_roles_follow_role_order(self) -> None:
        RoleOrder.objects.create(order=[self.admin.id, self.support.id, self.user.id])
        Role.objects.create(name="Auditor")

        response = self.client.get(reverse("role-list"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [role["name"] for role in response.data],
            ["Admin", "Support", "User", "Auditor"],
        )

    def test_roles_by_name_without_order(self) -> None:
        response = self.client.get(reverse("role-list"))

        self.assertEqual([role["name"] for role in response.data], ["Admin", "Support", "User"])

    def test_role_detail_includes_grants(self) -> None:
        response = self.client.get(reverse("role-detail", args=[self.admin.id]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["grants"], ["admin:*"])


class RoleOrderTests(TestCase):
    def test_load_returns_none_until_created(self) -> None:
        self.assertIsNone(RoleOrder.load())

    def test_roles_skips_deleted_ids(self) -> None:
        admin = Role.objects.create(name="Admin")
        user = Role.objects.create(name="User")
        order = RoleOrder.objects.create(order=[admin.id, 999, user.id])

        self.assertEqual([role.name for role in order.roles()], ["Admin", "User"])
        self.assertEqual(RoleOrder.load().pk, RoleOrder.SINGLETON_ID)
