"""
Configuration management for the Wrong Notebook tag service.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class PathsConfig:
    """Path configuration settings."""
    data_dir: str
    user_data_dir: str
    error_items_file: str


@dataclass
class TagsConfig:
    """Knowledge tag configuration settings."""
    suggestion_limit: int
    academic_year_start_month: int
    custom_tags_storage_key: str


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 22582,
                "debug": False
            },
            "paths": {
                "data_dir": "data",
                "user_data_dir": "user_data",
                "error_items_file": "data/error_items.json"
            },
            "tags": {
                "suggestion_limit": 20,
                "academic_year_start_month": 9,
                "custom_tags_storage_key": "wrongnotebook_custom_tags"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        # Path settings
        if os.getenv("DATA_DIR"):
            self._config["paths"]["data_dir"] = os.getenv("DATA_DIR")

        if os.getenv("USER_DATA_DIR"):
            self._config["paths"]["user_data_dir"] = os.getenv("USER_DATA_DIR")

        if os.getenv("ERROR_ITEMS_FILE"):
            self._config["paths"]["error_items_file"] = os.getenv("ERROR_ITEMS_FILE")

        # Tag settings
        if os.getenv("TAG_SUGGESTION_LIMIT"):
            self._config["tags"]["suggestion_limit"] = int(os.getenv("TAG_SUGGESTION_LIMIT"))

        if os.getenv("ACADEMIC_YEAR_START_MONTH"):
            self._config["tags"]["academic_year_start_month"] = int(os.getenv("ACADEMIC_YEAR_START_MONTH"))

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            data_dir=paths_config["data_dir"],
            user_data_dir=paths_config["user_data_dir"],
            error_items_file=paths_config["error_items_file"]
        )

    def get_tags_config(self) -> TagsConfig:
        """Get knowledge tag configuration."""
        tags_config = self._config["tags"]
        return TagsConfig(
            suggestion_limit=tags_config["suggestion_limit"],
            academic_year_start_month=tags_config["academic_year_start_month"],
            custom_tags_storage_key=tags_config["custom_tags_storage_key"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()


def get_tags_config() -> TagsConfig:
    """Get knowledge tag configuration."""
    return config_manager.get_tags_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
