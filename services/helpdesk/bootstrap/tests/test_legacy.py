"""Tests for rewriting legacy numeric ticket priorities."""
from __future__ import annotations

from pathlib import Path

from django.test import TestCase, TransactionTestCase

from bootstrap.catalog import seed_priorities
from bootstrap.exceptions import MissingPrerequisite, SubStepFailures
from bootstrap.legacy import count_legacy_tickets, migrate_legacy_priorities, migrate_legacy_value
from bootstrap.pipeline import BootstrapContext
from tickets.models import Priority, Ticket


class MigrateLegacyPrioritiesTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def _ticket(self, legacy_priority: int) -> Ticket:
        return Ticket.objects.create(title=f"Legacy {legacy_priority}", legacy_priority=legacy_priority)

    def test_rewrites_each_value_to_its_priority(self) -> None:
        seed_priorities(self.context)
        normal, urgent, critical = self._ticket(1), self._ticket(2), self._ticket(3)
        second_urgent = self._ticket(2)

        self.assertEqual(migrate_legacy_priorities(self.context), {1: 1, 2: 2, 3: 1})

        for ticket, expected in (
            (normal, "Normal"),
            (urgent, "Urgent"),
            (second_urgent, "Urgent"),
            (critical, "Critical"),
        ):
            ticket.refresh_from_db()
            self.assertEqual(ticket.priority.name, expected)
            self.assertIsNone(ticket.legacy_priority)

    def test_only_values_with_tickets_are_migrated(self) -> None:
        seed_priorities(self.context)
        ticket = self._ticket(3)

        self.assertEqual(migrate_legacy_priorities(self.context), {3: 1})

        ticket.refresh_from_db()
        self.assertEqual(ticket.priority.migration_num, 3)

    def test_nothing_pending_needs_no_priorities_and_writes_nothing(self) -> None:
        Ticket.objects.create(title="Modern")

        with self.assertNumQueries(3):
            self.assertEqual(migrate_legacy_priorities(self.context), {})

    def test_missing_priority_does_not_block_other_values(self) -> None:
        seed_priorities(self.context)
        Priority.objects.filter(migration_num=2).delete()
        normal, urgent, critical = self._ticket(1), self._ticket(2), self._ticket(3)

        with self.assertRaises(SubStepFailures) as caught:
            migrate_legacy_priorities(self.context)

        self.assertEqual([label for label, _ in caught.exception.failures], ["priority=2"])
        self.assertIsInstance(caught.exception.first, MissingPrerequisite)
        normal.refresh_from_db()
        critical.refresh_from_db()
        urgent.refresh_from_db()
        self.assertEqual(normal.priority.name, "Normal")
        self.assertEqual(critical.priority.name, "Critical")
        self.assertEqual(urgent.legacy_priority, 2)
        self.assertIsNone(urgent.priority)
        self.assertEqual(count_legacy_tickets(), {1: 0, 2: 1, 3: 0})

    def test_migrate_single_value(self) -> None:
        with self.assertRaises(MissingPrerequisite):
            migrate_legacy_value(1)

        seed_priorities(self.context)
        self._ticket(1)
        self.assertEqual(migrate_legacy_value(1), 1)
        self.assertEqual(migrate_legacy_value(1), 0)


class ThreadedLegacyMigrationTests(TransactionTestCase):
    """Sub-migrations on worker threads, each with its own connection."""

    def test_missing_priority_does_not_block_other_workers(self) -> None:
        context = BootstrapContext(app_root=Path("."), max_workers=3)
        seed_priorities(context)
        Priority.objects.filter(migration_num=2).delete()
        for value in (1, 2, 3):
            Ticket.objects.create(title=f"Legacy {value}", legacy_priority=value)

        with self.assertRaises(SubStepFailures) as caught:
            migrate_legacy_priorities(context)

        self.assertEqual([label for label, _ in caught.exception.failures], ["priority=2"])
        self.assertEqual(
            list(Ticket.objects.exclude(legacy_priority=None).values_list("legacy_priority", flat=True)),
            [2],
        )
        self.assertEqual(
            sorted(Ticket.objects.exclude(priority=None).values_list("priority__migration_num", flat=True)),
            [1, 3],
        )
