"""Minimal smoke tests for project scaffolding."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def test_analysis_engine_imports() -> None:
    """Import the analysis engine and verify the public entry point exists."""

    from analysis.engine import analyze_records

    assert callable(analyze_records)


def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "taiXiuTracker.settings")
    django.setup()
    assert "tracker.apps.TrackerConfig" in settings.INSTALLED_APPS
