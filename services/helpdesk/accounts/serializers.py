"""Serializers for role entities."""
from __future__ import annotations

from rest_framework import serializers

from .models import Role


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = [
            "id",
            "name",
            "description",
            "grants",
            "created_at",
            "updated_at",
        ]
