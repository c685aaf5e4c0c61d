"""Smoke tests for the ticket catalog API."""
from __future__ import annotations

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from .models import Priority, Ticket, TicketStatus, TicketTag, TicketType


class TicketCatalogApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.normal = Priority.objects.create(name="Normal", migration_num=1, is_default=True)
        self.urgent = Priority.objects.create(name="Urgent", migration_num=2, is_default=True)

    def test_list_priorities_in_migration_order(self) -> None:
        Priority.objects.create(name="Blocker")

        response = self.client.get(reverse("priority-list"))

        self.assertEqual(response.status_code, 200)
        numbered = [item["name"] for item in response.data if item["migration_num"] is not None]
        self.assertEqual(numbered, ["Normal", "Urgent"])
        self.assertEqual(len(response.data), 3)

    def test_ticket_type_includes_priorities(self) -> None:
        ticket_type = TicketType.objects.create(name="Issue")
        ticket_type.priorities.add(self.normal, self.urgent)

        response = self.client.get(reverse("ticket-type-detail", args=[ticket_type.id]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [priority["name"] for priority in response.data["priorities"]],
            ["Normal", "Urgent"],
        )

    def test_list_statuses_by_order(self) -> None:
        TicketStatus.objects.create(name="Closed", uid=3, order=3, is_locked=True)
        TicketStatus.objects.create(name="New", uid=0, order=0, is_locked=True)

        response = self.client.get(reverse("ticket-status-list"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["name"] for item in response.data], ["New", "Closed"])

    def test_catalog_is_read_only(self) -> None:
        response = self.client.post(reverse("priority-list"), {"name": "Low"}, format="json")

        self.assertEqual(response.status_code, 405)

    def test_health_endpoint(self) -> None:
        response = self.client.get(reverse("helpdesk-health"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"status": "ok"})


class TicketTagTests(TestCase):
    def test_save_trims_and_normalizes(self) -> None:
        tag = TicketTag.objects.create(name="  Needs Info ")

        tag.refresh_from_db()
        self.assertEqual(tag.name, "Needs Info")
        self.assertEqual(tag.normalized, "needs info")


class TicketModelTests(TestCase):
    def test_ticket_columns(self) -> None:
        columns = {field.name for field in Ticket._meta.concrete_fields}

        self.assertEqual(
            columns,
            {
                "id",
                "title",
                "description",
                "type",
                "status",
                "priority",
                "legacy_priority",
                "created_at",
                "updated_at",
            },
        )
        self.assertEqual([field.name for field in Ticket._meta.many_to_many], ["tags"])
