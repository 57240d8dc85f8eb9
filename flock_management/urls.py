"""
Flock Management URLs
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import BirdViewSet, ChickenViewSet, HealthRecordViewSet

router = DefaultRouter()
router.register(r'birds', BirdViewSet, basename='bird')
router.register(r'health-records', HealthRecordViewSet, basename='health-record')
router.register(r'chickens', ChickenViewSet, basename='chicken')

app_name = 'flock_management'

urlpatterns = [
    path('', include(router.urls)),
]
