"""
Farm Views

API Endpoints:
- GET /api/farms/ - Farms owned by the requesting user (all farms for staff)
- POST /api/farms/ - Register a farm owned by the requesting user
- GET/PUT/PATCH/DELETE /api/farms/{id}/ - Farm detail

Deleting a farm removes every record that belongs to it.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.response import Response

from core.api import IsFarmOwnerOrAdmin, owner_key, payload_dict
from core.entities import construct, update
from core.repository import EntityRepository
from .models import Farm
from .serializers import FarmSerializer

logger = logging.getLogger(__name__)


class FarmViewSet(viewsets.ModelViewSet):
    """ViewSet for farms."""
    serializer_class = FarmSerializer
    permission_classes = [IsFarmOwnerOrAdmin]
    lookup_field = 'id'

    def get_queryset(self):
        queryset = Farm.objects.all()
        user = self.request.user
        if not user.is_staff:
            queryset = queryset.filter(owner_id=owner_key(user))
        return queryset.order_by('created_at')

    def create(self, request, *args, **kwargs):
        data = payload_dict(request.data)
        # Staff may register a farm on behalf of another owner
        if not request.user.is_staff or 'owner_id' not in data:
            data['owner_id'] = owner_key(request.user)

        farm = construct(Farm, data)
        logger.info(f"Farm {farm.id} registered for owner {farm.owner_id}")
        return Response(self.get_serializer(farm).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        farm = update(self.get_object(), payload_dict(request.data))
        return Response(self.get_serializer(farm).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        EntityRepository(Farm).remove(instance.pk)
