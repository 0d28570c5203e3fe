"""User settings for the demo host and controller, stored as JSON."""

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, Tuple

from platformdirs import user_config_dir

from .log import get_logger

logger = get_logger(__name__)

APP_NAME = "ScreenGraph"

# Defaults for all configurable options
DEFAULT_CONFIG: Dict[str, Any] = {
    "display": {
        "width": 400,
        "height": 300,
        "scale": 2.0,
        "fps": 60,
        "caption": "Screen Graph",
    },
    "controller": {
        "strict": False,
        "allow_overwrite": True,
        "dispose_inactive": False,
    },
    "logging": {"level": "WARNING"},
}


def user_config_path() -> Path:
    """Return the platform-specific config file path."""
    return Path(user_config_dir(APP_NAME, APP_NAME)) / "config.json"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def _positive_number(value: Any, *, integer: bool) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if integer and not isinstance(value, int):
        return False
    return value > 0


def _valid_level(value: Any) -> bool:
    return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)


_VALIDATORS: Dict[str, Dict[str, Callable[[Any], bool]]] = {
    "display": {
        "width": lambda v: _positive_number(v, integer=True),
        "height": lambda v: _positive_number(v, integer=True),
        "scale": lambda v: _positive_number(v, integer=False),
        "fps": lambda v: _positive_number(v, integer=True),
        "caption": lambda v: isinstance(v, str),
    },
    "controller": {
        "strict": lambda v: isinstance(v, bool),
        "allow_overwrite": lambda v: isinstance(v, bool),
        "dispose_inactive": lambda v: isinstance(v, bool),
    },
    "logging": {"level": _valid_level},
}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of config with ill-typed known settings reset to defaults."""
    validated: Dict[str, Any] = deepcopy(config)
    for section, checks in _VALIDATORS.items():
        values = validated.get(section)
        if not isinstance(values, dict):
            logger.warning("Config section %r is not an object; using defaults", section)
            validated[section] = deepcopy(DEFAULT_CONFIG[section])
            continue
        for key, is_valid in checks.items():
            if key in values and not is_valid(values[key]):
                default = DEFAULT_CONFIG[section][key]
                logger.warning(
                    "Invalid config value %s.%s=%r; using %r", section, key, values[key], default
                )
                values[key] = default
    return validated


def load_config(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load config from disk, falling back to defaults on errors."""
    config_path = path or user_config_path()
    config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)

    try:
        if config_path.exists():
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                config = _deep_merge(config, loaded)
            else:
                logger.warning("Ignoring config %s: top level is not an object", config_path)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load config (%s): %s", config_path, exc)

    return validate_config(config), config_path


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk, creating parent dirs as needed."""
    config_path = path or user_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save config (%s): %s", config_path, exc)


__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG",
    "user_config_path",
    "validate_config",
    "load_config",
    "save_config",
]
