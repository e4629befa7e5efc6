"""Epoch-seconds acquisition from the system clock."""

from __future__ import annotations

import math
import time
from typing import Callable

from src.readable_time.core.errors import ClockError

EpochClock = Callable[[], float]


def time_since_epoch(now: EpochClock | None = None) -> int:
    """Return whole seconds since 1970-01-01T00:00:00Z.

    `now` defaults to `time.time`; inject a fixed callable in tests.
    """
    reading = (now or time.time)()
    if isinstance(reading, bool) or not isinstance(reading, (int, float)):
        raise ClockError(reading)
    if not math.isfinite(reading) or reading < 0:
        raise ClockError(reading)
    return int(reading)
