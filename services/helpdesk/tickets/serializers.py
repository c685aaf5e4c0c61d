"""Serializers for the ticket catalog."""
from __future__ import annotations

from rest_framework import serializers

from .models import Priority, TicketStatus, TicketType


class TicketStatusSerializer(serializers.ModelSerializer):
    class Meta:
        model = TicketStatus
        fields = [
            "id",
            "name",
            "html_color",
            "uid",
            "order",
            "slatimer",
            "is_resolved",
            "is_locked",
        ]


class PrioritySerializer(serializers.ModelSerializer):
    class Meta:
        model = Priority
        fields = [
            "id",
            "name",
            "html_color",
            "overdue_in",
            "is_default",
            "migration_num",
        ]


class TicketTypeSerializer(serializers.ModelSerializer):
    priorities = PrioritySerializer(many=True, read_only=True)

    class Meta:
        model = TicketType
        fields = [
            "id",
            "name",
            "priorities",
        ]
