"""Persistent user settings.

Settings live in a JSON file in the user's config directory. Only keys the
composer understands are applied; invalid values are dropped with a warning
so a hand-edited file can never keep the composer from starting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import platformdirs

from .constants import ComposerConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposerSettings:
    debounce_delay: float = ComposerConstants.DEBOUNCE_DELAY
    max_history: int = ComposerConstants.MAX_HISTORY
    max_chars: int = ComposerConstants.MAX_CHARS
    restore_draft: bool = True


class SettingsPersistence:
    """Manages persistent storage of composer settings."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize settings persistence.

        Args:
            config_dir: Directory for the settings file. Defaults to the
                platform's user config directory.
        """
        if config_dir is None:
            config_dir = platformdirs.user_config_dir(
                ComposerConstants.APP_NAME, ComposerConstants.APP_AUTHOR
            )
        self._config_dir = Path(config_dir)
        self._settings_file = self._config_dir / ComposerConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def load_raw(self) -> Dict[str, Any]:
        """Load the settings file as stored.

        Returns:
            Dictionary of stored settings. Empty if the file doesn't exist or
            can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def load(self) -> ComposerSettings:
        """Load settings, falling back to defaults for missing or invalid keys."""
        values = {}
        for key, value in self.load_raw().items():
            if key not in ComposerSettings.__dataclass_fields__:
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
                continue
            values[key] = value
        return ComposerSettings(**values)

    def save(self, settings: Dict[str, Any]) -> bool:
        """Merge ``settings`` into the stored file atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()
        merged = dict(self.load_raw())
        merged.update(settings)

        # Write to a temp file, then rename over the settings file
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(merged, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = merged
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'debounce_delay':
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return 0.05 <= value <= 10

        if key == 'max_history':
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return 1 <= value <= 1000

        if key == 'max_chars':
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return 1 <= value <= 100_000

        if key == 'restore_draft':
            return isinstance(value, bool)

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None
