"""Configuration service for todolite.

Loads and saves ``config.json`` in the platform config directory and
resolves where the key-value store file lives.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from todolite.adapters import FileLocalStorage
from todolite.models.config_models import AppConfig

STORAGE_ENV_VAR = "TODOLITE_STORAGE"
_STORAGE_FILE = "storage.json"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("todolite"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("todolite"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
            self.save_config()
        except ValidationError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key (e.g. ``ui.alert_seconds``)."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a config field
            ValueError: If the value fails validation
        """
        self.get(key)
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value: Any = AppConfig()
        for k in key.split("."):
            default_value = getattr(default_value, k)
        self.set(key, default_value)

    @property
    def storage_path(self) -> Path:
        """Location of the key-value store file.

        ``TODOLITE_STORAGE`` wins over ``storage.path``, which wins over the
        default file in the user data directory.
        """
        env = os.getenv(STORAGE_ENV_VAR)
        if env:
            return Path(env).expanduser().resolve()
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser().resolve()
        return self.data_dir / _STORAGE_FILE


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service


def get_storage() -> FileLocalStorage:
    """Get the key-value store configured for this user."""
    return FileLocalStorage(get_config_service().storage_path)
