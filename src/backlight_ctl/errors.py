from __future__ import annotations


class BacklightError(Exception):
    """Base class for every failure reported by backlight-ctl."""


class DeviceIOError(BacklightError):
    pass


class ParseError(BacklightError):
    pass


class DomainError(BacklightError):
    pass


class NotFoundError(BacklightError):
    def __init__(
        self,
        message: str,
        name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.name = name
        self.available = list(available or [])
