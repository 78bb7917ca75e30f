# src/fontbrowser/utils/config.py

"""
Manages application configuration settings.

This module provides a ConfigManager class that handles loading settings from a
JSON file, providing default values, and saving changes. Only presentation
settings live here (shortcuts, page size, point sizes). The browser's sample
text and script filter belong to the running session and are never saved.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Constants
APP_NAME = "fontbrowser"
CONFIG_FILE_NAME = "config.json"

# Default settings for the application
DEFAULT_CONFIG = {
    "browse_shortcut": "Ctrl+Alt+F",
    "refresh_shortcut": "F5",
    "page_size": 50,
    "preview_point_size": 14,
    "editor_point_size": 12,
}

# Set up a logger for this module
logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Determines the appropriate application configuration directory based on the OS.

    Returns:
        Path: The absolute path to the configuration directory.
    """
    if sys.platform == "win32":
        # Windows: %APPDATA%/fontbrowser
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    elif sys.platform == "darwin":
        # macOS: ~/Library/Application Support/fontbrowser
        return Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        # Linux/other: ~/.config/fontbrowser
        return Path.home() / ".config" / APP_NAME


class ConfigManager:
    """
    Handles loading, accessing, and saving application configuration.

    Settings are loaded from a file on startup and saved when changed. A
    missing or corrupted file never stops the application; the defaults are
    used instead.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initializes the ConfigManager, determines the config path, and loads the
        configuration.

        Args:
            config_dir (Path, optional): Overrides the per-OS configuration
                directory. Mostly useful for tests.
        """
        self.config_dir = Path(config_dir) if config_dir is not None else get_config_dir()
        self.config_path = self.config_dir / CONFIG_FILE_NAME
        self.config = {}
        self.load_config()

    def load_config(self):
        """
        Loads configuration from the JSON file. If the file doesn't exist it is
        created with default settings. If it is invalid, defaults are used.
        """
        # Start with defaults, then override with user's config
        self.config = DEFAULT_CONFIG.copy()

        if not self.config_path.exists():
            logger.info(f"Config file not found. Creating default config at: {self.config_path}")
            self.save_config()
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                logger.error(f"Config file {self.config_path} does not hold a JSON object. Using defaults.")
                return
            self.config.update(user_config)
            logger.info(f"Successfully loaded configuration from {self.config_path}")
        except json.JSONDecodeError:
            logger.error(
                f"Could not decode JSON from {self.config_path}. "
                "Using default configuration. The corrupted file will be overwritten on next save."
            )
        except OSError as e:
            logger.error(f"Could not read config file {self.config_path}: {e}. Using defaults.")

    def save_config(self):
        """
        Saves the current configuration to the JSON file.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4, sort_keys=True)
            logger.info(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}")

    def get(self, key: str, default=None):
        """
        Retrieves a configuration value.

        Args:
            key (str): The configuration key to retrieve.
            default: The value to return if the key is not found.

        Returns:
            The value associated with the key, or the default value.
        """
        return self.config.get(key, default)

    def get_int(self, key: str) -> int:
        """Retrieves an integer setting, falling back to the default on bad values."""
        value = self.config.get(key, DEFAULT_CONFIG.get(key))
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Config value for '{key}' is not an integer: {value!r}. Using default.")
            return int(DEFAULT_CONFIG[key])

    def set(self, key: str, value):
        """
        Sets a configuration value and saves the configuration to the file.

        Args:
            key (str): The configuration key to set.
            value: The new value for the key.
        """
        self.config[key] = value
        self.save_config()


_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """
    Returns the shared ConfigManager, creating it on first use.
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
