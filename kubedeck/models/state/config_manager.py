"""Settings loading from the YAML config file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubedeck.constants.defaults import CONFIG_PATH_DEFAULT
from kubedeck.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads AppSettings from disk and applies command line overrides."""

    @staticmethod
    def load(path: Path | None = None) -> AppSettings:
        """Load settings from ``path`` (default config location).

        A missing file yields default settings.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                or fails validation.
        """
        config_path = path or CONFIG_PATH_DEFAULT
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read {config_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @staticmethod
    def with_overrides(settings: AppSettings, **overrides: Any) -> AppSettings:
        """Return a copy of ``settings`` with non-None overrides applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return settings
        try:
            return AppSettings.model_validate({**settings.model_dump(), **values})
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid override: {exc}") from exc


__all__ = ["AppSettings", "ConfigError", "ConfigLoadError", "ConfigManager"]
