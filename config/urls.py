"""URL configuration for the StayHub project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore


def health(request):
    return JsonResponse({'status': 'ok'})


# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health, name='health'),
    # Application URLs
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/host-profiles/', include('apps.users.host_profile_urls')),
    path('api/v1/properties/', include('apps.properties.urls')),
    path('api/v1/availability/', include('apps.properties.availability_urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/reviews/', include('apps.reviews.urls')),
    path('api/v1/transactions/', include('apps.finances.urls')),
    # API schema and docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
