"""
Shared REST plumbing for farm-scoped entities.

Writes never go through serializer.save(): create and update hand the raw
payload to the explicit constructors/updaters in core.entities so unknown
and read-only fields are rejected the same way everywhere. Serializers are
only used to render records.
"""

import logging
import uuid

from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from core.entities import construct, update
from core.exceptions import InvalidInput, NotFound
from core.repository import EntityRepository

logger = logging.getLogger(__name__)


def owner_key(user):
    """The identifier stored in Farm.owner_id for ``user``."""
    return str(user.pk)


def payload_dict(data):
    """Plain dict from request.data (JSON dict or QueryDict)."""
    if hasattr(data, 'dict'):
        return data.dict()
    return dict(data)


def resolve_owned_farm(request, farm_id):
    """Farm ``farm_id`` if the requesting user may act on it."""
    from farms.models import Farm

    if not farm_id:
        raise InvalidInput('farm', 'is required')
    farm = EntityRepository(Farm).require(farm_id)
    if not request.user.is_staff and farm.owner_id != owner_key(request.user):
        # Do not reveal other owners' farms
        raise NotFound('Farm', farm_id)
    return farm


class IsFarmOwnerOrAdmin(permissions.BasePermission):
    """Permission check for farm owner or staff access."""

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        if request.user.is_staff:
            return True

        farm = obj if not hasattr(obj, 'farm') else obj.farm
        return getattr(farm, 'owner_id', None) == owner_key(request.user)


class FarmScopedViewSet(viewsets.ModelViewSet):
    """
    CRUD for an entity that belongs to a farm.

    - Non-staff users only see records of farms they own
    - ``?farm=<uuid>`` narrows the list to one farm
    - POST requires ``farm`` and checks ownership before construction
    """

    model = None
    permission_classes = [IsFarmOwnerOrAdmin]
    lookup_field = 'id'
    farm_lookup = 'farm'

    def get_queryset(self):
        queryset = self.model.objects.all()

        user = self.request.user
        if not user.is_staff:
            queryset = queryset.filter(**{f'{self.farm_lookup}__owner_id': owner_key(user)})

        farm_id = self.request.query_params.get('farm')
        if farm_id:
            try:
                farm_id = uuid.UUID(farm_id)
            except ValueError:
                raise InvalidInput('farm', f"'{farm_id}' is not a valid id")
            queryset = queryset.filter(**{f'{self.farm_lookup}_id': farm_id})

        return queryset.order_by('created_at')

    def create(self, request, *args, **kwargs):
        data = payload_dict(request.data)
        farm = resolve_owned_farm(request, data.pop('farm', None))
        instance = construct(self.model, data, farm=farm)
        logger.info(f"{self.model.__name__} {instance.id} created on farm {farm.id}")
        return Response(self.get_serializer(instance).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        instance = update(instance, payload_dict(request.data))
        return Response(self.get_serializer(instance).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        EntityRepository(self.model).remove(instance.pk)


class EntityViewSet(viewsets.ModelViewSet):
    """CRUD for an entity that is not tied to a farm."""

    model = None
    permission_classes = [permissions.IsAuthenticated]
    lookup_field = 'id'

    def get_queryset(self):
        return self.model.objects.all().order_by('created_at')

    def create(self, request, *args, **kwargs):
        instance = construct(self.model, payload_dict(request.data))
        return Response(self.get_serializer(instance).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = update(self.get_object(), payload_dict(request.data))
        return Response(self.get_serializer(instance).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        EntityRepository(self.model).remove(instance.pk)
