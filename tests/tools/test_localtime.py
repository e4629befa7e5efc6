import logging
import threading
import time
from types import SimpleNamespace

import pytest

from src.readable_time.core.errors import LocalTimeUnavailable
from src.readable_time.tools.kernel.localtime import decompose_local_time


def _struct(year, mon, mday, hour, minute, sec, wday, zone=None):
    # struct_time weekday is Monday=0 ... Sunday=6.
    return time.struct_time((year, mon, mday, hour, minute, sec, wday, 1, 0, zone, 0))


def test_decompose_local_time_copies_fields():
    raw = _struct(2025, 11, 30, 7, 14, 0, 6, "+0545")
    rt = decompose_local_time(1, source=lambda _: raw)

    assert rt.year == 2025
    assert rt.month == 11
    assert rt.day == 30
    assert rt.week_day == 1
    assert rt.hour_24 == 7
    assert rt.hour_12 == 7
    assert rt.minute == 14
    assert rt.second == 0
    assert rt.time_zone == "+0545"
    assert rt.extended_pretty_format() == "Sun Nov 30 07:14:00 +0545 2025"


@pytest.mark.parametrize(
    ("tm_wday", "week_day"),
    [(0, 2), (1, 3), (2, 4), (3, 5), (4, 6), (5, 7), (6, 1)],
)
def test_decompose_local_time_uses_sunday_based_weekday(tm_wday, week_day):
    raw = _struct(2024, 1, 15, 15, 45, 0, tm_wday, "UTC")
    assert decompose_local_time(0, source=lambda _: raw).week_day == week_day


@pytest.mark.parametrize(("hour_24", "hour_12"), [(0, 12), (1, 1), (12, 12), (13, 1), (23, 11)])
def test_decompose_local_time_derives_hour_12(hour_24, hour_12):
    raw = _struct(2024, 1, 15, hour_24, 0, 0, 0, "UTC")
    assert decompose_local_time(0, source=lambda _: raw).hour_12 == hour_12


@pytest.mark.parametrize("zone", [None, ""])
def test_decompose_local_time_missing_zone_uses_sentinel(zone, caplog: pytest.LogCaptureFixture):
    raw = _struct(2024, 1, 15, 9, 0, 0, 0, zone)
    with caplog.at_level(logging.DEBUG, logger="src.readable_time.tools.kernel.localtime"):
        rt = decompose_local_time(0, source=lambda _: raw)
    assert rt.time_zone == "unknown time_zone"
    assert "no zone abbreviation" in caplog.text


def test_decompose_local_time_accepts_struct_without_zone_attribute():
    raw = SimpleNamespace(tm_year=2024, tm_mon=2, tm_mday=29, tm_wday=3, tm_hour=12, tm_min=0, tm_sec=60)
    rt = decompose_local_time(0, source=lambda _: raw)
    assert rt.time_zone == "unknown time_zone"
    assert rt.basic_format() == "2024-02-29 12:00:60"


def test_decompose_local_time_passes_epoch_to_source():
    seen: list[int] = []

    def _source(epoch_seconds: int):
        seen.append(epoch_seconds)
        return _struct(2024, 1, 1, 0, 0, 0, 0, "UTC")

    decompose_local_time(1_700_000_000, source=_source)
    assert seen == [1_700_000_000]


def test_decompose_local_time_matches_platform_localtime():
    epoch = 1_700_000_000
    expected = time.localtime(epoch)
    rt = decompose_local_time(epoch)

    assert rt.year == expected.tm_year
    assert rt.month == expected.tm_mon
    assert rt.day == expected.tm_mday
    assert rt.hour_24 == expected.tm_hour
    assert rt.minute == expected.tm_min
    assert rt.second == expected.tm_sec
    assert rt.week_day == (expected.tm_wday + 1) % 7 + 1
    assert rt.time_zone == (expected.tm_zone or "unknown time_zone")


def test_decompose_local_time_returns_owned_strings():
    class _Zone(str):
        pass

    raw = _struct(2024, 1, 1, 0, 0, 0, 0, _Zone("PST"))
    rt = decompose_local_time(0, source=lambda _: raw)
    assert type(rt.time_zone) is str
    assert rt.time_zone == "PST"


@pytest.mark.parametrize("exc", [OverflowError("timestamp out of range"), OSError(75, "Value too large"), ValueError("bad")])
def test_decompose_local_time_wraps_platform_failures(exc):
    def _source(_):
        raise exc

    with pytest.raises(LocalTimeUnavailable) as exc_info:
        decompose_local_time(42, source=_source)
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.epoch_seconds == 42


def test_decompose_local_time_none_result_is_unavailable():
    with pytest.raises(LocalTimeUnavailable, match="no result"):
        decompose_local_time(0, source=lambda _: None)


def test_decompose_local_time_serializes_source_calls():
    guard = threading.Lock()
    active = {"count": 0, "peak": 0}
    results: list = []

    def _source(_):
        with guard:
            active["count"] += 1
            active["peak"] = max(active["peak"], active["count"])
        time.sleep(0.02)
        with guard:
            active["count"] -= 1
        return _struct(2024, 1, 1, 0, 0, 0, 0, "UTC")

    def _run_one() -> None:
        results.append(decompose_local_time(0, source=_source, serialize=True))

    threads = [threading.Thread(target=_run_one) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=2.0)

    assert len(results) == 4
    assert active["peak"] == 1
    assert all(r == results[0] for r in results)


def test_decompose_local_time_is_reentrant_without_lock():
    results: list = []

    def _run_one() -> None:
        results.append(decompose_local_time(1_700_000_000))

    threads = [threading.Thread(target=_run_one) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=2.0)

    assert len(results) == 8
    assert len(set(results)) == 1
