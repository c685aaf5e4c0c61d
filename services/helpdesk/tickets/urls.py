"""Route registration for ticket catalog endpoints."""
from __future__ import annotations

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import PriorityViewSet, TicketStatusViewSet, TicketTypeViewSet, health

router = DefaultRouter()
router.register("tickets/statuses", TicketStatusViewSet, basename="ticket-status")
router.register("tickets/priorities", PriorityViewSet, basename="priority")
router.register("tickets/types", TicketTypeViewSet, basename="ticket-type")

urlpatterns = [
    path("healthz/", health, name="helpdesk-health"),
    path("", include(router.urls)),
]
