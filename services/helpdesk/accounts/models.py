"""Database models for roles and their ordering."""
from __future__ import annotations

from typing import List

from django.db import models


class Role(models.Model):
    """A named set of grant strings."""

    name = models.CharField(max_length=64, unique=True)
    description = models.CharField(max_length=255, blank=True)
    grants = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class RoleOrder(models.Model):
    """Singleton holding role ids ordered from most to least privileged."""

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    order = models.JSONField(default=list)
    updated_at = models.DateTimeField(auto_now=True)

    @classmethod
    def load(cls) -> "RoleOrder | None":
        return cls.objects.filter(pk=cls.SINGLETON_ID).first()

    def roles(self) -> List[Role]:
        by_id = Role.objects.in_bulk(self.order)
        return [by_id[role_id] for role_id in self.order if role_id in by_id]

    def __str__(self) -> str:
        return " > ".join(role.name for role in self.roles())
