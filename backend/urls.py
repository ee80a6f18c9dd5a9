"""
URL configuration for the lms_backend project.

Mounts the Django admin and the LMS API under /api/lms/.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/lms/", include("lms.urls")),
]
