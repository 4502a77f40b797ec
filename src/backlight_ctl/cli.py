from __future__ import annotations

import argparse
import logging
import sys

from backlight_ctl import __version__, config
from backlight_ctl.config import ConfigError, Settings
from backlight_ctl.errors import BacklightError, NotFoundError, ParseError
from backlight_ctl.system.backlight import Backlight, list_devices, require_device

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="backlight-ctl",
        description="Show or set the brightness of a /sys/class/backlight device.",
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument(
        "-p",
        "--device",
        help="name of the light to use, same name as in path /sys/class/backlight",
    )
    ap.add_argument("-l", "--list", action="store_true", help="list available backlights")
    ap.add_argument("-c", "--config", help="YAML config file")
    ap.add_argument("--sysfs-root", help="directory holding the backlight devices")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ap.add_argument("percent", nargs="?", help="brightness to set, in percent")
    return ap


def parse_percent(text: str) -> float:
    try:
        return float(text)
    except ValueError as e:
        raise ParseError(f'Expected argument "{text}" to be a number: {e}') from e


def _level(verbose: int, cfg_level: str) -> int:
    level = getattr(logging, cfg_level)
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return min(level, logging.INFO)
    return level


def run(settings: Settings, parser: argparse.ArgumentParser, list_only: bool = False) -> int:
    try:
        devices = list_devices(settings.sysfs_root)
    except BacklightError as e:
        print(e, file=sys.stderr)
        return 1

    if list_only:
        for name in devices:
            print(name)
        return 0

    if not settings.device:
        parser.print_usage(sys.stderr)
        print(f"Available backlights: {' '.join(devices)}", file=sys.stderr)
        return 1
    try:
        require_device(settings.device, devices)
    except NotFoundError as e:
        print(e, file=sys.stderr)
        return 1

    light = Backlight.for_device(settings.device, settings.sysfs_root)
    try:
        brightness = light.read()
        print(f"Current brightness is {brightness.percent:.0f}%")
    except BacklightError as e:
        print(f"Failed to get current status of light: {e}", file=sys.stderr)
        return 1

    if settings.target is None:
        return 0

    try:
        percent = parse_percent(settings.target)
    except ParseError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        brightness = brightness.set_percent(percent)
        light.write(brightness)
        print(f"Set brightness to {brightness.percent:.0f}%")
    except BacklightError as e:
        print(f"Failed to set brightness: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config.load(args.config) if args.config else config.load_default()
    except ConfigError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=_level(args.verbose, config.log_level(cfg)),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = Settings(
        device=args.device,
        target=args.percent,
        sysfs_root=config.sysfs_root(cfg, args.sysfs_root),
    )
    log.debug("settings: %s", settings)
    return run(settings, parser, list_only=args.list)
