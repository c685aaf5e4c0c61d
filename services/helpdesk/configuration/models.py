"""Database models for process-wide settings and mail templates."""
from __future__ import annotations

from typing import Any

from django.db import models


class Setting(models.Model):
    """A named JSON value shared by the whole installation."""

    name = models.CharField(max_length=128, unique=True)
    value = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    @classmethod
    def get_value(cls, name: str, default: Any = None) -> Any:
        setting = cls.objects.filter(name=name).first()
        return default if setting is None else setting.value

    def __str__(self) -> str:
        return f"{self.name}={self.value!r}"


class MailTemplate(models.Model):
    name = models.CharField(max_length=64, unique=True)
    display_name = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    subject = models.CharField(max_length=255)
    data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.display_name or self.name
