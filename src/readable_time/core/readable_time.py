"""The ReadableTime record and its string formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .calendar_names import month_name, period_of_day, weekday_name

UNKNOWN_TIME_ZONE = "unknown time_zone"


@dataclass(frozen=True, slots=True)
class ReadableTime:
    """Local calendar fields for one instant.

    Fields are trusted as given; range checks only happen in the name lookups
    used by :meth:`pretty_format` and :meth:`extended_pretty_format`.
    """

    year: int
    month: int
    day: int
    week_day: int
    hour_24: int
    hour_12: int
    minute: int
    second: int
    time_zone: str = UNKNOWN_TIME_ZONE

    def basic_format(self) -> str:
        """Return ``YYYY-MM-DD HH:MM:SS``, e.g. ``2025-01-01 03:04:05``."""
        return (
            f"{self.year}-{self.month:02}-{self.day:02} "
            f"{self.hour_24:02}:{self.minute:02}:{self.second:02}"
        )

    def pretty_format(self) -> str:
        """Return e.g. ``Mon Jan 15 2024 03:45 PM``."""
        weekday = weekday_name(self.week_day)
        month = month_name(self.month)
        period = period_of_day(self.hour_24)
        return f"{weekday} {month} {self.day} {self.year} {self.hour_12:02}:{self.minute:02} {period}"

    def extended_pretty_format(self) -> str:
        """Return e.g. ``Sun Nov 30 07:14:00 +0545 2025``."""
        weekday = weekday_name(self.week_day)
        month = month_name(self.month)
        return (
            f"{weekday} {month} {self.day} "
            f"{self.hour_24:02}:{self.minute:02}:{self.second:02} "
            f"{self.time_zone} {self.year}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "week_day": self.week_day,
            "hour_24": self.hour_24,
            "hour_12": self.hour_12,
            "minute": self.minute,
            "second": self.second,
            "time_zone": self.time_zone,
        }
