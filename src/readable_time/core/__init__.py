"""Deterministic building blocks for readable_time."""

from .calendar_names import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
    hour_12_from_24,
    month_name,
    period_of_day,
    weekday_name,
)
from .errors import (
    ClockError,
    InvalidHour,
    InvalidMonth,
    InvalidWeekday,
    LocalTimeUnavailable,
    ReadableTimeError,
)
from .readable_time import UNKNOWN_TIME_ZONE, ReadableTime

__all__ = [
    "ClockError",
    "InvalidHour",
    "InvalidMonth",
    "InvalidWeekday",
    "LocalTimeUnavailable",
    "MONTH_ABBREVIATIONS",
    "ReadableTime",
    "ReadableTimeError",
    "UNKNOWN_TIME_ZONE",
    "WEEKDAY_ABBREVIATIONS",
    "hour_12_from_24",
    "month_name",
    "period_of_day",
    "weekday_name",
]
