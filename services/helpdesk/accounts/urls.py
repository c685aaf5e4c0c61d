"""Route registration for role endpoints."""
from __future__ import annotations

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import RoleViewSet

router = SimpleRouter()
router.register("roles", RoleViewSet, basename="role")

urlpatterns = [
    path("", include(router.urls)),
]
