"""Tests for seeding ticket statuses and priorities, backfill, and tag normalization."""
from __future__ import annotations

from pathlib import Path

from django.test import TestCase

from bootstrap.catalog import (
    backfill_ticket_type_priorities,
    normalize_tags,
    seed_priorities,
    seed_ticket_statuses,
)
from bootstrap.pipeline import BootstrapContext
from tickets.models import Priority, TicketStatus, TicketTag, TicketType


class SeedTicketStatusesTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def test_creates_builtin_statuses(self) -> None:
        created = seed_ticket_statuses(self.context)

        self.assertEqual(created, ["New", "Open", "Pending", "Closed"])
        statuses = list(TicketStatus.objects.values_list("name", "uid", "is_locked"))
        self.assertEqual(
            statuses,
            [("New", 0, True), ("Open", 1, True), ("Pending", 2, True), ("Closed", 3, True)],
        )
        self.assertTrue(TicketStatus.objects.get(uid=1).slatimer)
        self.assertTrue(TicketStatus.objects.get(uid=3).is_resolved)

    def test_second_run_creates_nothing(self) -> None:
        seed_ticket_statuses(self.context)

        self.assertEqual(seed_ticket_statuses(self.context), [])
        self.assertEqual(TicketStatus.objects.filter(name="New", uid=0).count(), 1)
        self.assertEqual(TicketStatus.objects.count(), 4)

    def test_edited_builtin_status_is_not_reset(self) -> None:
        seed_ticket_statuses(self.context)
        TicketStatus.objects.filter(uid=2).update(html_color="#000000", order=9)

        seed_ticket_statuses(self.context)

        pending = TicketStatus.objects.get(name="Pending", uid=2)
        self.assertEqual(pending.html_color, "#000000")
        self.assertEqual(pending.order, 9)

    def test_unlocked_status_does_not_count_as_builtin(self) -> None:
        TicketStatus.objects.create(name="New", uid=0, is_locked=False)

        self.assertIn("New", seed_ticket_statuses(self.context))
        self.assertEqual(TicketStatus.objects.filter(name="New", is_locked=True).count(), 1)


class SeedPrioritiesTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def test_creates_default_priorities(self) -> None:
        self.assertEqual(seed_priorities(self.context), ["Normal", "Urgent", "Critical"])

        priorities = Priority.objects.order_by("migration_num")
        self.assertEqual(
            [(p.name, p.migration_num, p.is_default) for p in priorities],
            [("Normal", 1, True), ("Urgent", 2, True), ("Critical", 3, True)],
        )
        self.assertEqual(priorities[0].overdue_in, 2880)

    def test_renamed_priority_is_not_recreated(self) -> None:
        seed_priorities(self.context)
        Priority.objects.filter(migration_num=2).update(name="High")

        self.assertEqual(seed_priorities(self.context), [])
        self.assertEqual(Priority.objects.count(), 3)
        self.assertFalse(Priority.objects.filter(name="Urgent").exists())


class BackfillTicketTypePrioritiesTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))
        seed_priorities(self.context)

    def test_empty_type_gets_defaults(self) -> None:
        issue = TicketType.objects.create(name="Issue")

        self.assertEqual(backfill_ticket_type_priorities(self.context), ["Issue"])
        self.assertEqual(
            sorted(issue.priorities.values_list("migration_num", flat=True)), [1, 2, 3]
        )

    def test_type_with_priorities_is_untouched(self) -> None:
        custom = Priority.objects.create(name="Whenever")
        task = TicketType.objects.create(name="Task")
        task.priorities.add(custom)

        self.assertEqual(backfill_ticket_type_priorities(self.context), [])
        self.assertEqual(list(task.priorities.all()), [custom])

    def test_noop_without_default_priorities(self) -> None:
        Priority.objects.update(is_default=False)
        issue = TicketType.objects.create(name="Issue")

        self.assertEqual(backfill_ticket_type_priorities(self.context), [])
        self.assertFalse(issue.priorities.exists())


class NormalizeTagsTests(TestCase):
    def setUp(self) -> None:
        self.context = BootstrapContext(app_root=Path("."))

    def test_rewrites_stale_tags_only(self) -> None:
        clean = TicketTag.objects.create(name="billing")
        stale = TicketTag.objects.create(name="Bug")
        TicketTag.objects.filter(pk=stale.pk).update(name="  Bug ", normalized="")

        self.assertEqual(normalize_tags(self.context), 1)

        stale.refresh_from_db()
        self.assertEqual((stale.name, stale.normalized), ("Bug", "bug"))
        clean.refresh_from_db()
        self.assertEqual(clean.normalized, "billing")
        self.assertEqual(normalize_tags(self.context), 0)
