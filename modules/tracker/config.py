"""Tracker configuration.

Loads from YAML config file with environment variable overrides.
Pattern: TRACKER__{KEY} overrides YAML keys.
Example: TRACKER__WORKDAY_HOURS=7.5
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


DEFAULT_CONFIG_PATH = "~/.assistant/tracker.yml"
ENV_PREFIX = "TRACKER"


class TrackerConfig(BaseModel):
    data_dir: str = "~/.assistant/data/tracker"
    workday_hours: float = Field(default=8.0, gt=0, le=24, description="Target hours per working day")
    debug: bool = False

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()


def _apply_env_overrides(config_dict: dict, prefix: str = ENV_PREFIX) -> dict:
    """Apply environment variable overrides to config dict.

    Pattern: TRACKER__KEY=value maps to config[key] = value
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue
        parts = key[len(prefix) + 2 :].lower().split("__")
        target = config_dict
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        # Type coercion for common cases
        if value.lower() in ("true", "false"):
            value = value.lower() == "true"
        elif value.isdigit():
            value = int(value)
        target[parts[-1]] = value
    return config_dict


def load_config(config_path: Optional[str] = None) -> TrackerConfig:
    """Load configuration from YAML file with env overrides.

    Priority: env vars > YAML file > defaults
    """
    config_dict = {}

    # 1. Load YAML if exists
    if config_path is None:
        config_path = os.getenv("TRACKER_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    path = Path(config_path).expanduser()
    if path.exists():
        with open(path, encoding="utf-8") as f:
            config_dict = yaml.safe_load(f) or {}
        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

    # 2. Apply env overrides
    config_dict = _apply_env_overrides(config_dict)

    # 3. DEBUG=true from the environment (common pattern)
    if os.getenv("DEBUG") == "true":
        config_dict["debug"] = True

    return TrackerConfig(**config_dict)


_config: Optional[TrackerConfig] = None


def get_config() -> TrackerConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Optional[str] = None) -> TrackerConfig:
    global _config
    _config = load_config(config_path)
    return _config
