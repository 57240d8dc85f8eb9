"""
URL configuration for core project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token-obtain-pair'),  # JWT login
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('api/farms/', include('farms.urls')),  # Farm registry
    path('api/flocks/', include('flock_management.urls')),  # Birds, health records, chickens
    path('api/feed/', include('feed_inventory.urls')),  # Farm inventory and feed stock
    path('api/sales/', include('sales_revenue.urls')),  # Products, transactions, orders
    path('api/dashboards/', include('dashboards.urls')),  # Farm reports
]
