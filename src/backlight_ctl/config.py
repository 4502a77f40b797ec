from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from backlight_ctl.paths import SYSFS_BACKLIGHT, default_config_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_KNOWN_KEYS = {"sysfs_root", "log_level"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    """Everything one invocation needs, resolved from flags and config."""

    device: str | None = None
    target: str | None = None
    sysfs_root: Path = SYSFS_BACKLIGHT


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config {p} is not valid UTF-8: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    validate(data)
    return data


def load_default() -> dict[str, Any]:
    """Load the per-user config file if there is one, else return an empty config."""

    p = default_config_path()
    if not p.is_file():
        return {}
    return load(p)


def validate(cfg: dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    if "sysfs_root" in cfg:
        root = cfg["sysfs_root"]
        if not isinstance(root, str) or not root:
            raise ConfigError("sysfs_root must be a non-empty string")

    if "log_level" in cfg and str(cfg["log_level"]).upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")


def log_level(cfg: dict[str, Any]) -> str:
    return str(cfg.get("log_level", "WARNING")).upper()


def sysfs_root(cfg: dict[str, Any], override: str | None = None) -> Path:
    if override:
        return Path(override)
    return Path(cfg.get("sysfs_root", SYSFS_BACKLIGHT))
