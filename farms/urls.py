"""
Farm URL Configuration
"""
from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import FarmViewSet

app_name = 'farms'

router = SimpleRouter()
router.register(r'', FarmViewSet, basename='farm')

urlpatterns = [
    path('', include(router.urls)),
]
