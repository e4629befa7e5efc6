"""Error types raised by readable_time.

Every failure is an ordinary, expected outcome: callers branch on the type and
can render ``str(exc)`` directly to a user or a log line.
"""

from __future__ import annotations

from typing import Any


class ReadableTimeError(Exception):
    """Base exception for all readable_time errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ClockError(ReadableTimeError):
    """Raised when the system clock reads earlier than the Unix epoch."""

    def __init__(self, reading: Any) -> None:
        super().__init__(
            f"system clock reports a time before the unix epoch: {reading!r}",
            {"reading": reading},
        )
        self.reading = reading


class LocalTimeUnavailable(ReadableTimeError):
    """Raised when the local-time decomposition call fails."""

    def __init__(self, epoch_seconds: int, reason: str | None = None) -> None:
        message = "could not get local time, the local-time decomposition failed"
        if reason:
            message += f": {reason}"
        super().__init__(message, {"epoch_seconds": epoch_seconds})
        self.epoch_seconds = epoch_seconds


class InvalidWeekday(ReadableTimeError, ValueError):
    def __init__(self, week_day: Any) -> None:
        super().__init__("invalid day of week, only 1-7 are valid days", {"week_day": week_day})
        self.week_day = week_day


class InvalidMonth(ReadableTimeError, ValueError):
    def __init__(self, month: Any) -> None:
        super().__init__("invalid month, month should be 1-12", {"month": month})
        self.month = month


class InvalidHour(ReadableTimeError, ValueError):
    def __init__(self, hour_24: Any) -> None:
        super().__init__("invalid hour, hour should be in 0-23 format", {"hour_24": hour_24})
        self.hour_24 = hour_24
