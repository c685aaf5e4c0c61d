"""Read-only API views for the ticket catalog."""
from __future__ import annotations

from rest_framework import viewsets
from rest_framework.decorators import api_view
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.request import Request
from rest_framework.response import Response

from .models import Priority, TicketStatus, TicketType
from .serializers import PrioritySerializer, TicketStatusSerializer, TicketTypeSerializer


class TicketStatusViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = TicketStatus.objects.all()
    serializer_class = TicketStatusSerializer
    filter_backends = [OrderingFilter]
    ordering_fields = ["order", "uid", "name"]
    ordering = ["order"]


class PriorityViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Priority.objects.all()
    serializer_class = PrioritySerializer
    filter_backends = [SearchFilter, OrderingFilter]
    search_fields = ["name"]
    ordering_fields = ["migration_num", "name"]


class TicketTypeViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = TicketType.objects.prefetch_related("priorities").all()
    serializer_class = TicketTypeSerializer
    filter_backends = [SearchFilter, OrderingFilter]
    search_fields = ["name"]
    ordering_fields = ["name"]
    ordering = ["name"]


@api_view(["GET"])
def health(request: Request):  # type: ignore[override]
    """Readiness endpoint for orchestration tooling."""

    return Response({"status": "ok"})
