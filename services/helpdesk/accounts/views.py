"""Read-only API views for roles."""
from __future__ import annotations

from rest_framework import viewsets
from rest_framework.request import Request
from rest_framework.response import Response

from .models import Role, RoleOrder
from .serializers import RoleSerializer


class RoleViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Role.objects.all()
    serializer_class = RoleSerializer

    def list(self, request: Request, *args, **kwargs):  # type: ignore[override]
        """List roles most privileged first; roles outside the order follow by name."""

        roles = list(self.get_queryset())
        role_order = RoleOrder.load()
        if role_order is not None:
            positions = {role_id: index for index, role_id in enumerate(role_order.order)}
            roles.sort(key=lambda role: (positions.get(role.id, len(positions)), role.name))
        serializer = self.get_serializer(roles, many=True)
        return Response(serializer.data)
