"""
Settings for Flight Manager.
These are configurable parameters that can be changed by the user.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any

from .constants import (
    DEFAULT_DB_HOST,
    DEFAULT_DB_PORT,
    DEFAULT_DB_NAME,
    DEFAULT_DB_USER,
    DEFAULT_DB_PASSWORD,
    DEFAULT_FLIGHT_CATEGORY,
)
from ..data.models import FlightCategory

logger = logging.getLogger("flight_manager.settings")


@dataclass
class DatabaseConfig:
    """Connection parameters for the flights database"""
    host: str = DEFAULT_DB_HOST
    port: int = DEFAULT_DB_PORT
    database: str = DEFAULT_DB_NAME
    user: str = DEFAULT_DB_USER
    password: str = DEFAULT_DB_PASSWORD

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "DatabaseConfig":
        """
        Build a config from a settings dictionary.
        Missing keys keep their default values.

        Args:
            values: Dictionary with any of host, port, database, user, password

        Returns:
            DatabaseConfig: The connection parameters
        """
        config = cls()
        for key in ("host", "database", "user", "password"):
            if values.get(key) is not None:
                setattr(config, key, str(values[key]))
        if values.get("port") is not None:
            config.port = int(values["port"])
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def describe(self) -> str:
        """Connection target without the password, for logs and errors"""
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class Settings:
    """
    Application settings that can be loaded from and saved to a configuration file.
    Uses a singleton pattern to ensure only one settings instance exists.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._settings = self._default_settings()

        self.config_dir = Path(self._get_config_dir())
        self.config_file = self.config_dir / "settings.json"
        self.load_settings()

        self._initialized = True

    @staticmethod
    def _default_settings() -> Dict[str, Any]:
        return {
            # Database connection
            "database": DatabaseConfig().to_dict(),

            # Records
            "default_category": DEFAULT_FLIGHT_CATEGORY,

            # Diagnostics
            "log_level": "INFO",
        }

    @staticmethod
    def _get_config_dir() -> str:
        """Get the configuration directory for the application"""
        if os.name == 'nt':  # Windows
            return os.path.join(os.environ.get('APPDATA', ''), 'FlightManager')
        return os.path.join(os.path.expanduser("~"), '.config', 'flight-manager')

    def load_settings(self) -> None:
        """Load settings from the configuration file"""
        try:
            if self.config_file.exists():
                with open(self.config_file, 'r') as f:
                    loaded_settings = json.load(f)
                self._settings.update(loaded_settings)
                logger.info(f"Settings loaded from {self.config_file}")
            else:
                logger.info("No settings file found, using defaults")
                self.save_settings()
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings: {e}")

    def save_settings(self) -> bool:
        """Save current settings to the configuration file"""
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self._settings, f, indent=4)
            logger.info(f"Settings saved to {self.config_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key"""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key"""
        self._settings[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all settings as a dictionary"""
        return self._settings.copy()

    def get_database_config(self) -> DatabaseConfig:
        """Get the database connection parameters"""
        return DatabaseConfig.from_dict(self._settings.get("database") or {})

    def get_default_category(self) -> FlightCategory:
        """Get the category given to flights entered at the console"""
        value = self._settings.get("default_category", DEFAULT_FLIGHT_CATEGORY)
        try:
            return FlightCategory(str(value).lower())
        except ValueError:
            logger.warning(f"Unknown flight category '{value}', using {DEFAULT_FLIGHT_CATEGORY}")
            return FlightCategory(DEFAULT_FLIGHT_CATEGORY)

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values"""
        self._settings = self._default_settings()
        self.save_settings()
        logger.info("Settings reset to defaults")


# Create a global settings instance
settings = Settings()
