"""
Flock Management API Views

API Endpoints:
- /api/flocks/birds/ - Bird batch CRUD (farm-scoped)
- /api/flocks/health-records/ - Health record CRUD (farm-scoped)
- /api/flocks/chickens/ - Individual chicken CRUD
- /api/flocks/chickens/by-breed/?breed=... - Chickens of one breed
- /api/flocks/chickens/egg-production/ - Total egg production
- /api/flocks/chickens/{id}/vaccinate/ - Record a vaccination
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from core.api import EntityViewSet, FarmScopedViewSet
from core.exceptions import InvalidInput
from .models import Bird, Chicken, HealthRecord
from .serializers import BirdSerializer, ChickenSerializer, HealthRecordSerializer
from .services import ChickenService


class BirdViewSet(FarmScopedViewSet):
    """ViewSet for bird batches. Filter with ``?status=`` or ``?breed=``."""
    model = Bird
    serializer_class = BirdSerializer
    filterset_fields = ['status', 'breed']


class HealthRecordViewSet(FarmScopedViewSet):
    """ViewSet for health records. Filter with ``?type=``."""
    model = HealthRecord
    serializer_class = HealthRecordSerializer
    filterset_fields = ['type', 'batch_number']


class ChickenViewSet(EntityViewSet):
    """ViewSet for individually tracked chickens."""
    model = Chicken
    serializer_class = ChickenSerializer
    filterset_fields = ['breed', 'vaccination_status']

    @action(detail=False, methods=['get'], url_path='by-breed')
    def by_breed(self, request):
        breed = request.query_params.get('breed')
        if not breed:
            raise InvalidInput('breed', 'is required')

        chickens = ChickenService().chickens_by_breed(breed)
        return Response(self.get_serializer(chickens, many=True).data)

    @action(detail=False, methods=['get'], url_path='egg-production')
    def egg_production(self, request):
        return Response({'total_egg_production': ChickenService().total_egg_production()})

    @action(detail=True, methods=['post'])
    def vaccinate(self, request, id=None):
        chicken = ChickenService().record_vaccination(id)
        return Response(self.get_serializer(chicken).data)
