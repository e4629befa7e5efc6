"""Fixed English abbreviations for weekdays and months, plus the AM/PM rule."""

from __future__ import annotations

from .errors import InvalidHour, InvalidMonth, InvalidWeekday

# Index 0 is Sunday; callers pass 1-based values.
WEEKDAY_ABBREVIATIONS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _in_range(value: int, low: int, high: int) -> bool:
    # bool is an int subclass; True/False are not calendar values.
    return isinstance(value, int) and not isinstance(value, bool) and low <= value <= high


def weekday_name(week_day: int) -> str:
    """Return the abbreviation for a 1-based weekday (1 = Sunday ... 7 = Saturday)."""
    if not _in_range(week_day, 1, 7):
        raise InvalidWeekday(week_day)
    return WEEKDAY_ABBREVIATIONS[week_day - 1]


def month_name(month: int) -> str:
    """Return the abbreviation for a 1-based month (1 = January)."""
    if not _in_range(month, 1, 12):
        raise InvalidMonth(month)
    return MONTH_ABBREVIATIONS[month - 1]


def period_of_day(hour_24: int) -> str:
    """Return ``"AM"`` for hours 0-11 and ``"PM"`` for hours 12-23."""
    if not _in_range(hour_24, 0, 23):
        raise InvalidHour(hour_24)
    return "AM" if hour_24 < 12 else "PM"


def hour_12_from_24(hour_24: int) -> int:
    if hour_24 == 0:
        return 12
    if 13 <= hour_24 <= 23:
        return hour_24 - 12
    # 1-12 are already 12-hour values; anything else passes through untouched.
    return hour_24
