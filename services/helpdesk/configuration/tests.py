"""Tests for settings and mail template models."""
from __future__ import annotations

from django.test import TestCase

from .models import MailTemplate, Setting


class SettingTests(TestCase):
    def test_get_value_returns_default_when_missing(self) -> None:
        self.assertIsNone(Setting.get_value("gen:timezone"))
        self.assertEqual(Setting.get_value("gen:timezone", "UTC"), "UTC")

    def test_get_value_round_trips_json(self) -> None:
        Setting.objects.create(name="es:port", value=9200)
        Setting.objects.create(name="maintenanceMode:enable", value=False)

        self.assertEqual(Setting.get_value("es:port"), 9200)
        self.assertIs(Setting.get_value("maintenanceMode:enable", True), False)


class MailTemplateTests(TestCase):
    def test_str_prefers_display_name(self) -> None:
        template = MailTemplate.objects.create(name="new-ticket", subject="Created")
        self.assertEqual(str(template), "new-ticket")

        template.display_name = "New Ticket"
        self.assertEqual(str(template), "New Ticket")
