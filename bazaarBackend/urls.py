"""
URL configuration for bazaarBackend project.

Public routes: health check, API docs, auth and browse. Everything else
requires a bearer token.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("", include("system_info.urls")),
    path("admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # API endpoints
    path("api/auth/", include("authentication.urls")),
    path("api/users/", include("authentication.user_urls")),
    path("api/", include("marketplace.urls")),
    path("api/notifications/", include("notifications.urls")),
    path("api/uploads/", include("uploads.urls")),
]
