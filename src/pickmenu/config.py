"""Configuration for menu defaults with env var overrides."""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("pickmenu.config")

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting PICKMENU_CONFIG_DIR env var.

    This is the single source of truth for config directory resolution.
    """
    config_dir = os.environ.get("PICKMENU_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "pickmenu"


class Config:
    """Construction-time menu defaults. Read-only once a menu runs."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "vim_keys": False,
        # Layout
        "label_width": 25,
        "marker": "-",
        # Styles (rich style definitions)
        "selected_style": "on blue",
        "normal_style": "",
        "hint_style": "color(187)",
        "title_style": "bold",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        # Return cached instance if available and no custom dir specified
        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        # Cache if using default directory
        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    data = json.loads(content)
                    if not isinstance(data, dict):
                        raise ValueError("top level is not an object")
                    self._data = self._drop_mistyped(data)
            except (json.JSONDecodeError, ValueError):
                # Corrupted config - use defaults
                logger.warning("Ignoring unreadable config file %s", self._config_file)
                self._data = {}

    def _drop_mistyped(self, data: dict[str, Any]) -> dict[str, Any]:
        """Keep only values whose type matches the default's."""
        kept: dict[str, Any] = {}
        for key, value in data.items():
            default = self.DEFAULTS.get(key)
            if default is not None and type(value) is not type(default):
                logger.warning("Ignoring config value %s=%r", key, value)
                continue
            kept[key] = value
        return kept

    def _apply_env_overrides(self) -> None:
        """Apply PICKMENU_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"PICKMENU_{key.upper()}"
            if env_key in os.environ:
                try:
                    self._data[key] = self._coerce(os.environ[env_key], type(default))
                except ValueError:
                    logger.warning("Ignoring %s=%r", env_key, os.environ[env_key])

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value
