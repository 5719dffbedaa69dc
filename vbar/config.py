"""Application configuration management."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from vbar.models import AppConfig

log = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".config" / "vbar"
_CONFIG_FILE = _CONFIG_DIR / "config.json"


def load_config() -> AppConfig:
    """Load config from disk, returning defaults if none exists."""
    if _CONFIG_FILE.exists():
        try:
            data = json.loads(_CONFIG_FILE.read_text())
            return AppConfig(**data)
        except (json.JSONDecodeError, TypeError, ValidationError) as exc:
            log.warning("Ignoring invalid config file %s: %s", _CONFIG_FILE, exc)
    return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Write config to disk. Returns the config file path."""
    _CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    _CONFIG_FILE.write_text(config.model_dump_json(indent=2))
    return _CONFIG_FILE


def get_threshold() -> float:
    """Return the configured classification threshold."""
    return load_config().threshold


def set_threshold(value: float) -> AppConfig:
    """Set the classification threshold and save config.

    Raises ``pydantic.ValidationError`` for a negative value.
    """
    config = load_config()
    config = AppConfig(**{**config.model_dump(), "threshold": value})
    save_config(config)
    return config


def reset_config() -> AppConfig:
    """Reset to the default configuration."""
    config = AppConfig()
    save_config(config)
    return config
