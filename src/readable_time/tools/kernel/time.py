"""Current local time as a ReadableTime record or a plain summary dict."""

from __future__ import annotations

from typing import Any

from src.readable_time.core.calendar_names import period_of_day
from src.readable_time.core.readable_time import ReadableTime

from .clock import EpochClock, time_since_epoch
from .localtime import LocalTimeSource, decompose_local_time


def _read_now(
    clock: EpochClock | None,
    source: LocalTimeSource | None,
    serialize: bool,
) -> tuple[int, ReadableTime]:
    epoch_seconds = time_since_epoch(clock)
    readable = decompose_local_time(epoch_seconds, source=source, serialize=serialize)
    return epoch_seconds, readable


def get_current_readable_time(
    *,
    clock: EpochClock | None = None,
    source: LocalTimeSource | None = None,
    serialize: bool = False,
) -> ReadableTime:
    """Read the clock and return its local calendar fields.

    Raises `ClockError` or `LocalTimeUnavailable`; nothing is cached, so each
    call sees the clock afresh. Pass `serialize=True` on platforms whose
    `localtime` must not run on several threads at once.
    """
    _, readable = _read_now(clock, source, serialize)
    return readable


def get_current_time(
    *,
    clock: EpochClock | None = None,
    source: LocalTimeSource | None = None,
    serialize: bool = False,
) -> dict[str, Any]:
    """Return every format of the current local time from one clock reading."""
    epoch_seconds, readable = _read_now(clock, source, serialize)
    return {
        "epoch_seconds": epoch_seconds,
        "basic": readable.basic_format(),
        "pretty": readable.pretty_format(),
        "extended_pretty": readable.extended_pretty_format(),
        "period": period_of_day(readable.hour_24),
        "time_zone": readable.time_zone,
        "fields": readable.to_dict(),
        "source": "system_clock_localtime",
    }
