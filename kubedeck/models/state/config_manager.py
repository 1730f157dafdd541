"""Persistent settings storage."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubedeck.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubedeck.utils.paths import settings_path

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves AppSettings as YAML."""

    @staticmethod
    def load(path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when the file does not exist.

        Raises:
            ConfigLoadError: When the file exists but cannot be parsed.
        """
        target = path or settings_path()
        if not target.exists():
            logger.debug("No settings file at %s, using defaults", target)
            return AppSettings()
        try:
            with open(target, encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Unable to read settings {target}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {target} must contain a mapping")
        try:
            return AppSettings.model_validate(raw.get("kubedeck", raw))
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {target}: {exc}") from exc

    @staticmethod
    def save(settings: AppSettings, path: Path | None = None) -> Path:
        """Persist settings.

        Raises:
            ConfigSaveError: When the file cannot be written.
        """
        target = path or settings_path()
        payload = {"kubedeck": settings.model_dump(mode="json")}
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8") as handle:
                yaml.safe_dump(payload, handle, sort_keys=False)
        except OSError as exc:
            raise ConfigSaveError(f"Unable to write settings {target}: {exc}") from exc
        return target


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
