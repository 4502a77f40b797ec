from __future__ import annotations

import os
from pathlib import Path

SYSFS_BACKLIGHT = Path("/sys/class/backlight")


def default_config_path(app_name: str = "backlight-ctl") -> Path:
    """Return where the optional config file is looked up.

    Uses XDG_CONFIG_HOME when available, else ~/.config.
    """

    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".config"
    return root / app_name / "config.yaml"
