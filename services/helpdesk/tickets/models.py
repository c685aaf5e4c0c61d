"""Database models for tickets and the catalog entities they reference."""
from __future__ import annotations

from django.db import models
from django.db.models import Q


class TicketStatus(models.Model):
    """A ticket lifecycle state; locked statuses are built in and keyed by uid."""

    name = models.CharField(max_length=64)
    html_color = models.CharField(max_length=16, default="#29b955")
    uid = models.PositiveSmallIntegerField()
    order = models.PositiveSmallIntegerField(default=0)
    slatimer = models.BooleanField(default=False)
    is_resolved = models.BooleanField(default=False)
    is_locked = models.BooleanField(default=False)

    class Meta:
        ordering = ["order", "uid"]
        verbose_name_plural = "ticket statuses"
        constraints = [
            models.UniqueConstraint(
                fields=["name", "uid"],
                condition=Q(is_locked=True),
                name="unique_locked_ticket_status",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Priority(models.Model):
    """A ticket priority; built-in priorities carry the legacy number they replace."""

    name = models.CharField(max_length=64, unique=True)
    html_color = models.CharField(max_length=16, default="#29b955")
    overdue_in = models.PositiveIntegerField(default=2880, help_text="Minutes until overdue.")
    is_default = models.BooleanField(default=False)
    migration_num = models.PositiveSmallIntegerField(null=True, blank=True, unique=True)

    class Meta:
        ordering = ["migration_num", "name"]
        verbose_name_plural = "priorities"

    def __str__(self) -> str:
        return self.name


class TicketType(models.Model):
    name = models.CharField(max_length=64, unique=True)
    priorities = models.ManyToManyField(Priority, related_name="ticket_types", blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


def normalize_tag(name: str) -> str:
    return name.strip().lower()


class TicketTag(models.Model):
    name = models.CharField(max_length=64)
    normalized = models.CharField(max_length=64, db_index=True, editable=False)

    class Meta:
        ordering = ["normalized"]

    def save(self, *args, **kwargs) -> None:  # type: ignore[override]
        self.name = self.name.strip()
        self.normalized = normalize_tag(self.name)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """A support ticket.

    Older installations stored the priority as a bare number (1, 2 or 3) in
    ``legacy_priority``; the startup bootstrap rewrites those into ``priority``.
    """

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    type = models.ForeignKey(
        TicketType,
        on_delete=models.PROTECT,
        related_name="tickets",
        null=True,
        blank=True,
    )
    status = models.ForeignKey(
        TicketStatus,
        on_delete=models.PROTECT,
        related_name="tickets",
        null=True,
        blank=True,
    )
    priority = models.ForeignKey(
        Priority,
        on_delete=models.PROTECT,
        related_name="tickets",
        null=True,
        blank=True,
    )
    legacy_priority = models.PositiveSmallIntegerField(null=True, blank=True, db_index=True)
    tags = models.ManyToManyField(TicketTag, related_name="tickets", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "id"]

    def __str__(self) -> str:
        return f"{self.title} ({self.status})"
