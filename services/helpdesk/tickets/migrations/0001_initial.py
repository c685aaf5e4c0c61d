# Generated manually for initial schema.
from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Priority",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64, unique=True)),
                ("html_color", models.CharField(default="#29b955", max_length=16)),
                ("overdue_in", models.PositiveIntegerField(default=2880, help_text="Minutes until overdue.")),
                ("is_default", models.BooleanField(default=False)),
                ("migration_num", models.PositiveSmallIntegerField(blank=True, null=True, unique=True)),
            ],
            options={"ordering": ["migration_num", "name"], "verbose_name_plural": "priorities"},
        ),
        migrations.CreateModel(
            name="TicketStatus",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64)),
                ("html_color", models.CharField(default="#29b955", max_length=16)),
                ("uid", models.PositiveSmallIntegerField()),
                ("order", models.PositiveSmallIntegerField(default=0)),
                ("slatimer", models.BooleanField(default=False)),
                ("is_resolved", models.BooleanField(default=False)),
                ("is_locked", models.BooleanField(default=False)),
            ],
            options={"ordering": ["order", "uid"], "verbose_name_plural": "ticket statuses"},
        ),
        migrations.AddConstraint(
            model_name="ticketstatus",
            constraint=models.UniqueConstraint(
                condition=models.Q(is_locked=True),
                fields=("name", "uid"),
                name="unique_locked_ticket_status",
            ),
        ),
        migrations.CreateModel(
            name="TicketTag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64)),
                ("normalized", models.CharField(db_index=True, editable=False, max_length=64)),
            ],
            options={"ordering": ["normalized"]},
        ),
        migrations.CreateModel(
            name="TicketType",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64, unique=True)),
                (
                    "priorities",
                    models.ManyToManyField(blank=True, related_name="ticket_types", to="tickets.priority"),
                ),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("legacy_priority", models.PositiveSmallIntegerField(blank=True, db_index=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "priority",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="tickets.priority",
                    ),
                ),
                (
                    "status",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="tickets.ticketstatus",
                    ),
                ),
                (
                    "type",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="tickets.tickettype",
                    ),
                ),
                ("tags", models.ManyToManyField(blank=True, related_name="tickets", to="tickets.tickettag")),
            ],
            options={"ordering": ["-created_at", "id"]},
        ),
    ]
