"""URL configuration for tracker views."""

from __future__ import annotations

from django.urls import path

from tracker import views

app_name = "tracker"

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("records/<int:record_id>/digits/<int:column>/", views.edit_digit_view, name="edit_digit"),
    path("history/truncate/", views.truncate_history_view, name="truncate_history"),
    path("history/reset/", views.reset_history_view, name="reset_history"),
    path("api/analysis/", views.analysis_api, name="analysis_api"),
]
