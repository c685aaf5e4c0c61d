"""Seed default roles, statuses, priorities and settings from the command line."""
from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from bootstrap.exceptions import BootstrapError
from bootstrap.orchestrator import run


class Command(BaseCommand):
    help = "Seed default configuration and migrate legacy data. Safe to run repeatedly."

    def handle(self, *args, **options) -> None:
        try:
            report = run()
        except BootstrapError as exc:
            raise CommandError(str(exc)) from exc

        for step in report.completed:
            self.stdout.write(f"  {step}")
        if report.timezone:
            self.stdout.write(f"Timezone: {report.timezone}")
        self.stdout.write(self.style.SUCCESS(f"Bootstrap complete ({len(report.completed)} steps)."))
