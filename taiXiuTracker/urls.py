"""URL configuration for the Tai Xiu tracker."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("tracker.urls")),
]
