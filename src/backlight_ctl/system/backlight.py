from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from pathlib import Path

from backlight_ctl.errors import DeviceIOError, DomainError, NotFoundError, ParseError
from backlight_ctl.paths import SYSFS_BACKLIGHT

log = logging.getLogger(__name__)

PERMISSION_HINT = (
    "write access to the brightness file must be granted outside backlight-ctl, "
    "e.g. with a udev rule adding group write permission for the video group"
)


def list_devices(root: Path = SYSFS_BACKLIGHT) -> list[str]:
    """Return the sorted names of the backlight devices under ``root``."""

    try:
        names = sorted(entry.name for entry in root.iterdir())
    except OSError as e:
        raise DeviceIOError(f"failed to read {root}: {e}") from e
    if not names:
        raise NotFoundError("no backlights found")
    log.debug("found backlights in %s: %s", root, names)
    return names


def require_device(name: str, devices: list[str]) -> None:
    if name not in devices:
        raise NotFoundError(
            f'Did not find backlight "{name}". Available backlights: {" ".join(devices)}',
            name=name,
            available=devices,
        )


@dataclass(frozen=True)
class Brightness:
    current: int
    max: int

    @property
    def percent(self) -> float:
        if self.max == 0:
            raise DomainError("device reports max_brightness of 0")
        return 100.0 * self.current / self.max

    def set_percent(self, p: float) -> Brightness:
        """Return a copy with ``current`` set to ``p`` percent of ``max``.

        The result is truncated toward zero. ``p`` is not range checked, so
        values outside 0-100 give raw values outside 0-max.
        """

        if not math.isfinite(p):
            raise DomainError(f"percentage must be finite, got {p}")
        return replace(self, current=int((p / 100.0) * self.max))


def _read_int(path: Path) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeviceIOError(f"failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"expected an integer in {path}, got undecodable bytes") from e
    try:
        value = int(text.strip(), 10)
    except ValueError as e:
        raise ParseError(f"expected an integer in {path}, got {text.strip()!r}") from e
    log.debug("read %s = %d", path, value)
    return value


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @classmethod
    def for_device(cls, name: str, root: Path = SYSFS_BACKLIGHT) -> Backlight:
        return cls(root / name)

    @property
    def name(self) -> str:
        return self.sysfs_dir.name

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    def read(self) -> Brightness:
        return Brightness(
            current=_read_int(self._brightness),
            max=_read_int(self._max_brightness),
        )

    def write(self, b: Brightness) -> None:
        # No trailing newline; the kernel accepts either.
        try:
            self._brightness.write_text(str(int(b.current)), encoding="utf-8")
        except PermissionError as e:
            raise DeviceIOError(f"{e} ({PERMISSION_HINT})") from e
        except OSError as e:
            raise DeviceIOError(str(e)) from e
        log.info("wrote raw brightness %d to %s", b.current, self._brightness)


def read(name: str, root: Path = SYSFS_BACKLIGHT) -> Brightness:
    return Backlight.for_device(name, root).read()


def write(name: str, b: Brightness, root: Path = SYSFS_BACKLIGHT) -> None:
    Backlight.for_device(name, root).write(b)
