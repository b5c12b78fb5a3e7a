"""Tests for application settings."""

import json

from config.settings import AppSettings
from generators.utils.grid_layout import PageGeometry


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults_without_file(self, tmp_path) -> None:
        settings = AppSettings(settings_file=str(tmp_path / "missing.json"))

        assert settings.get("locale") == "es"
        assert settings.get("margin") == 15
        assert settings.get("report_title") == "LAVADA DE ESCALAS"

    def test_load_overrides(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"apartments": [1, 2], "margin": 20}), encoding="utf-8")

        settings = AppSettings(settings_file=str(path))

        assert settings.get("apartments") == [1, 2]
        assert settings.get("margin") == 20
        assert settings.get("page_width") == 210

    def test_corrupt_file_keeps_defaults(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        settings = AppSettings(settings_file=str(path))

        assert settings.get("locale") == "es"

    def test_save_and_reload(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        settings = AppSettings(settings_file=str(path))
        settings.set("report_title", "ESCALAS", auto_save=True)

        assert AppSettings(settings_file=str(path)).get("report_title") == "ESCALAS"

    def test_set_without_auto_save_does_not_write(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        AppSettings(settings_file=str(path)).set("locale", "en")
        assert not path.exists()

    def test_recent_directories(self, settings) -> None:
        settings.add_recent_directory("a")
        settings.add_recent_directory("b")
        settings.add_recent_directory("a")

        assert settings.get("recent_directories") == ["a", "b"]

    def test_page_geometry(self, settings) -> None:
        settings.update({"margin": 10, "max_table_height": 100})

        geometry = settings.page_geometry()

        assert isinstance(geometry, PageGeometry)
        assert geometry.margin == 10
        assert geometry.max_table_height == 100
        assert geometry.page_width == 210

    def test_reset_to_defaults(self, settings) -> None:
        settings.set("locale", "en")
        settings.reset_to_defaults()
        assert settings.get("locale") == "es"
