"""
Application configuration and settings management.
"""
import json
import os
from typing import Any, Dict, Optional

from generators.utils.grid_layout import PageGeometry
from utils.logging_config import get_logger

logger = get_logger(__name__)

GEOMETRY_KEYS = ("page_width", "page_height", "margin", "min_table_height", "max_table_height")


class AppSettings:
    """Application settings manager with persistent storage."""

    def __init__(self, settings_file: str = "settings.json"):
        """
        Initialize settings manager.

        Args:
            settings_file: Path to settings JSON file
        """
        self.settings_file = settings_file
        self._settings = self._load_default_settings()
        self.load()

    def _load_default_settings(self) -> Dict[str, Any]:
        """
        Returns:
            Dictionary with default settings
        """
        return {
            "locale": "es",
            "apartments": [301, 302, 201, 202, 101, 102],
            "output_directory": "output",
            "report_title": "LAVADA DE ESCALAS",
            "report_note": "Mantener las escalas aseadas nos beneficia a todos. Muchas gracias",
            "page_width": 210,
            "page_height": 297,
            "margin": 15,
            "min_table_height": 80,
            "max_table_height": 120,
            "log_level": "INFO",
            "auto_save_settings": False,
            "max_recent_directories": 10,
            "recent_directories": []
        }

    def load(self) -> bool:
        """
        Load settings from file.

        Returns:
            True if loaded successfully, False if using defaults
        """
        if not os.path.exists(self.settings_file):
            logger.debug(f"Settings file {self.settings_file} not found, using defaults")
            return False
        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                file_settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading settings from {self.settings_file}: {e}")
            return False
        if not isinstance(file_settings, dict):
            logger.error(f"Settings file {self.settings_file} does not contain an object, using defaults")
            return False
        self._settings.update(file_settings)
        logger.info(f"Settings loaded from {self.settings_file}")
        return True

    def save(self) -> bool:
        """
        Save settings to file.

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False
        logger.info(f"Settings saved to {self.settings_file}")
        return True

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set(self, key: str, value: Any, auto_save: bool = None) -> None:
        """
        Set setting value.

        Args:
            key: Setting key
            value: Setting value
            auto_save: Whether to auto-save (uses setting if None)
        """
        self._settings[key] = value

        if auto_save is None:
            auto_save = self.get("auto_save_settings", False)

        if auto_save:
            self.save()

    def update(self, settings: Dict[str, Any], auto_save: bool = None) -> None:
        """
        Update multiple settings.

        Args:
            settings: Dictionary of settings to update
            auto_save: Whether to auto-save (uses setting if None)
        """
        self._settings.update(settings)

        if auto_save is None:
            auto_save = self.get("auto_save_settings", False)

        if auto_save:
            self.save()

    def add_recent_directory(self, dir_path: str) -> None:
        """
        Add directory to the front of the recent directories list.

        Args:
            dir_path: Path to recently used output directory
        """
        recent_dirs = [d for d in self.get("recent_directories", []) if d != dir_path]
        recent_dirs.insert(0, dir_path)
        self.set("recent_directories", recent_dirs[:self.get("max_recent_directories", 10)])

    def page_geometry(self) -> PageGeometry:
        """Build the PDF page geometry from the configured dimensions."""
        return PageGeometry(**{key: float(self.get(key)) for key in GEOMETRY_KEYS})

    def reset_to_defaults(self) -> None:
        """Reset all settings to defaults."""
        self._settings = self._load_default_settings()
        self.save()
        logger.info("Settings reset to defaults")


class ConfigManager:
    """Global configuration manager."""

    _instance: Optional['ConfigManager'] = None
    _settings: Optional[AppSettings] = None

    def __new__(cls) -> 'ConfigManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._settings is None:
            self._settings = AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @classmethod
    def get_instance(cls) -> 'ConfigManager':
        return cls()
