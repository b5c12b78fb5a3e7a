"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from config.settings import AppSettings
from generators.utils.grid_layout import PageGeometry
from scheduling.schedule_service import generate_schedule


@pytest.fixture
def apartments() -> list:
    """Rotation order used by most scenarios."""
    return [301, 302, 201, 202]


@pytest.fixture
def today() -> date:
    """Fixed reference date so past-start warnings are deterministic."""
    return date(2025, 1, 1)


@pytest.fixture
def june_schedule(apartments, today):
    """Five Sundays of June 2025 over four apartments."""
    return generate_schedule(apartments, "2025-06-01", "2025-06-29", today=today)


@pytest.fixture
def geometry() -> PageGeometry:
    """A4 page with a 15 mm margin."""
    return PageGeometry()


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    """Settings backed by a file in a temporary directory."""
    app_settings = AppSettings(settings_file=str(tmp_path / "settings.json"))
    app_settings.set("output_directory", str(tmp_path / "output"))
    return app_settings
