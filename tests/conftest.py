from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def sysfs(tmp_path: Path) -> Path:
    root = tmp_path / "backlight"
    root.mkdir()
    return root


@pytest.fixture
def make_light(sysfs: Path) -> Callable[..., Path]:
    def _make(name: str, current: int | str, maximum: int | str) -> Path:
        d = sysfs / name
        d.mkdir()
        (d / "brightness").write_text(f"{current}\n", encoding="utf-8")
        (d / "max_brightness").write_text(f"{maximum}\n", encoding="utf-8")
        return d

    return _make


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
