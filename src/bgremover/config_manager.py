"""Configuration manager for user settings.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    CONFIG_FILE,
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_SERVICE_URL,
    DEFAULT_TIMEOUT,
    REMOVE_BACKGROUND_PATH,
)
from .i18n import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

SERVICE_URL_ENV = "BGREMOVER_SERVICE_URL"


def _default_service_url() -> str:
    return os.getenv(SERVICE_URL_ENV, DEFAULT_SERVICE_URL)


class ConfigManager:
    """Manages application configuration and user settings."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize config manager and load existing config."""
        self.config_file = config_file or CONFIG_FILE
        self.config = self._load_config()
        self._ensure_defaults()

    def _defaults(self) -> dict:
        return {
            "language": DEFAULT_LANGUAGE,
            "service_url": _default_service_url(),
            "download_directory": str(DEFAULT_DOWNLOAD_DIR),
            "request_timeout": DEFAULT_TIMEOUT,
        }

    def _load_config(self) -> dict:
        """Load configuration from file or create default."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    config = json.load(f)
                if isinstance(config, dict):
                    logger.info(f"Loaded config from {self.config_file}")
                    return config
                logger.warning(f"Ignoring malformed config in {self.config_file}, using defaults")
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")

        return self._defaults()

    def _ensure_defaults(self):
        """Ensure essential keys exist when older configs are loaded."""
        updated = False
        for key, value in self._defaults().items():
            if key == "service_url":
                if not self.config.get(key):
                    self.config[key] = value
                    updated = True
            elif key not in self.config:
                self.config[key] = value
                updated = True
        if updated or not self.config_file.exists():
            self._save_config()

    def _save_config(self):
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
            logger.info(f"Saved config to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")

    def get_language(self) -> str:
        """Return the UI language."""
        return self.config.get("language", DEFAULT_LANGUAGE)

    def set_language(self, language: str):
        """Persist UI language selection."""
        self.config["language"] = language
        self._save_config()

    def get_service_url(self) -> str:
        """Return the base URL of the background removal service."""
        url = self.config.get("service_url") or _default_service_url()
        return url.strip()

    def set_service_url(self, url: str):
        """Persist the service base URL."""
        self.config["service_url"] = url
        self._save_config()

    def get_endpoint(self) -> str:
        """Return the full URL of the remove-background endpoint."""
        return build_endpoint(self.get_service_url())

    def get_download_directory(self) -> Path:
        """Get the configured download directory, creating it if needed."""
        download_dir = Path(self.config.get("download_directory", str(DEFAULT_DOWNLOAD_DIR)))

        try:
            download_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create download directory {download_dir}: {e}")
            download_dir = DEFAULT_DOWNLOAD_DIR
            download_dir.mkdir(parents=True, exist_ok=True)

        return download_dir

    def set_download_directory(self, directory: Path):
        """Set the download directory and save config."""
        self.config["download_directory"] = str(directory)
        self._save_config()
        logger.info(f"Download directory set to: {directory}")

    def get_request_timeout(self) -> float:
        """Return request timeout in seconds, falling back to the default."""
        value = self.config.get("request_timeout", DEFAULT_TIMEOUT)
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            return DEFAULT_TIMEOUT
        return parsed if parsed > 0 else DEFAULT_TIMEOUT


def build_endpoint(service_url: str) -> str:
    """Join a service base URL with the remove-background path."""
    base = service_url.strip().rstrip("/")
    if base.endswith(REMOVE_BACKGROUND_PATH):
        return base
    return f"{base}{REMOVE_BACKGROUND_PATH}"


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
