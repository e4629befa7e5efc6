"""Local-time decomposition through the platform `localtime` facility.

This module is the only place that talks to the OS time-zone machinery. The
result is copied into a `ReadableTime` before returning, so nothing returned by
the platform call outlives it.
"""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any, Callable

from src.readable_time.core.calendar_names import hour_12_from_24
from src.readable_time.core.errors import LocalTimeUnavailable
from src.readable_time.core.readable_time import UNKNOWN_TIME_ZONE, ReadableTime

logger = logging.getLogger(__name__)

# Anything returning a `time.struct_time`-like object for epoch seconds.
LocalTimeSource = Callable[[int], Any]

_LOCALTIME_LOCK = Lock()


def _call_source(source: LocalTimeSource, epoch_seconds: int, *, serialize: bool) -> Any:
    try:
        if serialize:
            with _LOCALTIME_LOCK:
                return source(epoch_seconds)
        return source(epoch_seconds)
    except (OverflowError, OSError, ValueError) as exc:
        raise LocalTimeUnavailable(epoch_seconds, str(exc) or type(exc).__name__) from exc


def _sunday_based_week_day(tm_wday: int) -> int:
    # struct_time counts Monday=0 ... Sunday=6.
    return (tm_wday + 1) % 7 + 1


def _zone_label(raw_zone: Any) -> str:
    if isinstance(raw_zone, bytes):
        raw_zone = raw_zone.decode("utf-8", errors="replace")
    if isinstance(raw_zone, str) and raw_zone:
        return str(raw_zone)
    logger.debug("local time has no zone abbreviation, using %r", UNKNOWN_TIME_ZONE)
    return UNKNOWN_TIME_ZONE


def decompose_local_time(
    epoch_seconds: int,
    *,
    source: LocalTimeSource | None = None,
    serialize: bool = False,
) -> ReadableTime:
    """Split epoch seconds into local calendar fields.

    `source` defaults to `time.localtime`. When `serialize` is true the source
    call runs under a process-wide lock, for platforms whose `localtime` is not
    safe to call from several threads at once.
    """
    raw = _call_source(source or time.localtime, epoch_seconds, serialize=serialize)
    if raw is None:
        raise LocalTimeUnavailable(epoch_seconds, "no result")

    hour_24 = int(raw.tm_hour)
    return ReadableTime(
        year=int(raw.tm_year),
        month=int(raw.tm_mon),
        day=int(raw.tm_mday),
        week_day=_sunday_based_week_day(int(raw.tm_wday)),
        hour_24=hour_24,
        hour_12=hour_12_from_24(hour_24),
        minute=int(raw.tm_min),
        second=int(raw.tm_sec),
        time_zone=_zone_label(getattr(raw, "tm_zone", None)),
    )
