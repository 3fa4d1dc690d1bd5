# modmanager/services/config_service.py
import json
from pathlib import Path
from typing import Any

from modmanager.core.constants import (
    CONFIG_SECTION_EXECUTABLE_PATHS,
    CONFIG_SECTION_INSTALLATION_PATHS,
    CONFIG_SECTION_SETTINGS,
)
from modmanager.models.config_model import AppConfig
from modmanager.utils.logger_utils import logger


class ConfigSaveError(IOError):
    pass


def _parse_path_map(data: dict, section: str) -> dict[str, str]:
    """Keeps only string -> non-empty string entries of a path section."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        logger.warning(f"'{section}' in config.json is not an object. Ignoring.")
        return {}

    paths: dict[str, str] = {}
    for mode_id, path in raw.items():
        if isinstance(path, str) and path:
            paths[str(mode_id)] = path
        else:
            logger.warning(
                f"Invalid {section} entry for '{mode_id}': {path!r}. Skipping."
            )
    return paths


class ConfigService:
    """Manages all read/write operations for the config.json file."""

    def __init__(self, config_path: Path):
        # --- Service Setup ---
        self.config_path = config_path

    def load_config(self) -> AppConfig:
        """
        Loads the configuration from config.json.
        A missing or unreadable file yields a default AppConfig.
        """
        if not self.config_path.exists():
            logger.warning(
                f"Config file not found at '{self.config_path}'. Returning default config."
            )
            return AppConfig()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                logger.error("config.json does not contain an object. Returning default config.")
                return AppConfig()

            installation_paths = _parse_path_map(data, CONFIG_SECTION_INSTALLATION_PATHS)
            executable_paths = _parse_path_map(data, CONFIG_SECTION_EXECUTABLE_PATHS)

            settings = data.get(CONFIG_SECTION_SETTINGS, {})
            last_active_mode_id = settings.get("last_active_mode_id") if isinstance(settings, dict) else None

            logger.info("Successfully loaded configuration from config.json.")
            return AppConfig(
                installation_paths=installation_paths,
                executable_paths=executable_paths,
                last_active_mode_id=last_active_mode_id,
            )

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config.json: {e}. Returning default config.")
            return AppConfig()
        except OSError as e:
            logger.error(f"Failed to read config.json: {e}. Returning default config.")
            return AppConfig()

    def save_config(self, config: AppConfig):
        """Serializes the whole AppConfig to config.json."""
        logger.info(f"Saving configuration to {self.config_path}...")

        config_data = {
            CONFIG_SECTION_SETTINGS: {
                "last_active_mode_id": config.last_active_mode_id,
            },
            CONFIG_SECTION_INSTALLATION_PATHS: dict(config.installation_paths),
            CONFIG_SECTION_EXECUTABLE_PATHS: dict(config.executable_paths),
        }

        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=4)

            logger.info("Configuration saved successfully to config.json.")

        except OSError as e:
            logger.error(f"IOError while saving config: {e}", exc_info=True)
            raise ConfigSaveError(f"Failed to write to config file: {e}") from e
        except TypeError as e:
            logger.error(f"TypeError during JSON serialization: {e}", exc_info=True)
            raise ConfigSaveError(f"A data type could not be saved to JSON: {e}") from e

    def save_setting(self, key: str, value: Any, section: str = CONFIG_SECTION_SETTINGS):
        """
        Saves a single key-value pair to the config.json file.
        Reads the entire file, updates one value, and writes it back.
        """
        section = section.lower()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r", encoding="utf-8") as f:
                    config_data = json.load(f)
            else:
                config_data = {
                    CONFIG_SECTION_SETTINGS: {},
                    CONFIG_SECTION_INSTALLATION_PATHS: {},
                    CONFIG_SECTION_EXECUTABLE_PATHS: {},
                }

            if not isinstance(config_data, dict):
                logger.warning("config.json does not contain an object. Starting fresh.")
                config_data = {}
            if not isinstance(config_data.get(section), dict):
                config_data[section] = {}

            config_data[section][key] = value

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=4)

            logger.info(f"Saved setting: [{section}] {key} = {value}")

        except (OSError, json.JSONDecodeError, TypeError) as e:
            logger.error(f"Failed to save setting '{key}' to config file: {e}")
            raise ConfigSaveError(f"Failed to update setting '{key}': {e}") from e
