from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from loadshedding.core.constants import SAST
from loadshedding.core.models import MonthlyShedding, RawManualSchedule
from loadshedding.parsers.errors import MalformedTimeOfDay, MalformedTimestamp
from loadshedding.parsers.normalizer import (
    ScheduleNormalizer,
    normalize_monthly_shedding,
    normalize_schedule,
    normalize_shedding,
    try_normalize_schedule,
)
from tests.helpers import raw_monthly, raw_shedding, sample_raw_schedule


def test_shedding_copies_stage_and_source() -> None:
    shedding = normalize_shedding(raw_shedding(stage=6, source="twitter"))

    assert shedding.start == datetime(2024, 6, 1, 18, 0, tzinfo=SAST)
    assert shedding.finish == datetime(2024, 6, 1, 20, 30, tzinfo=SAST)
    assert shedding.stage == 6
    assert shedding.source == "twitter"


def test_shedding_allows_finish_before_start() -> None:
    shedding = normalize_shedding(raw_shedding(start="2024-06-01T18:00", finish="2024-06-01T16:00"))

    assert shedding.finish < shedding.start


def test_shedding_reports_failing_field() -> None:
    with pytest.raises(MalformedTimestamp) as exc_info:
        normalize_shedding(raw_shedding(finish="tomorrow"))

    assert exc_info.value.field == "finish"
    assert exc_info.value.value == "tomorrow"


def test_monthly_crossing_midnight_example() -> None:
    event = normalize_monthly_shedding(raw_monthly("22:00", "00:30", stage=4, day_of_month=15))

    assert event == MonthlyShedding(
        start_time=datetime(1970, 1, 1, 22, 0, tzinfo=SAST),
        finish_time=datetime(1970, 1, 2, 0, 30, tzinfo=SAST),
        stage=4,
        day_of_month=15,
        crosses_midnight=True,
    )
    assert event.start_time.isoformat() == "1970-01-01T22:00:00+02:00"
    assert event.finish_time.isoformat() == "1970-01-02T00:30:00+02:00"
    assert event.duration == timedelta(hours=2, minutes=30)


def test_monthly_same_day_window() -> None:
    event = normalize_monthly_shedding(raw_monthly("08:00", "10:30"))

    assert event.crosses_midnight is False
    assert event.start_time.date() == event.finish_time.date()
    assert event.duration == timedelta(hours=2, minutes=30)


def test_monthly_equal_times_do_not_cross_midnight() -> None:
    event = normalize_monthly_shedding(raw_monthly("12:00", "12:00"))

    assert event.crosses_midnight is False
    assert event.duration == timedelta(0)


@pytest.mark.parametrize(
    ("start", "finish"),
    [("00:01", "00:00"), ("23:59", "00:00"), ("20:00", "04:00"), ("12:30", "12:29")],
)
def test_monthly_crossing_midnight_finishes_next_day(start: str, finish: str) -> None:
    event = normalize_monthly_shedding(raw_monthly(start, finish))

    assert event.crosses_midnight is True
    assert event.finish_time.date() - event.start_time.date() == timedelta(days=1)
    assert event.duration > timedelta(0)


def test_monthly_reports_failing_field() -> None:
    with pytest.raises(MalformedTimeOfDay) as exc_info:
        normalize_monthly_shedding(raw_monthly(start_time="25:00"))

    assert exc_info.value.field == "start_time"


def test_normalizer_applies_injected_offset() -> None:
    offset = timezone(timedelta(hours=1))
    normalizer = ScheduleNormalizer(offset)

    event = normalizer.monthly(raw_monthly("22:00", "00:30"))
    shedding = normalizer.shedding(raw_shedding())

    assert event.start_time.utcoffset() == timedelta(hours=1)
    assert shedding.start.utcoffset() == timedelta(hours=1)


def test_schedule_preserves_order_and_collections() -> None:
    raw = sample_raw_schedule()

    schedule = normalize_schedule(raw)

    assert schedule.changes == tuple(normalize_shedding(item) for item in raw.changes)
    assert schedule.historical_changes == (normalize_shedding(raw.historical_changes[0]),)
    assert [item.stage for item in schedule.changes] == [4, 2]


def test_schedule_fails_fast_on_malformed_record() -> None:
    raw = RawManualSchedule(
        changes=(raw_shedding(), raw_shedding(start="not-a-time")),
        historical_changes=(raw_shedding(finish="also-bad"),),
    )

    with pytest.raises(MalformedTimestamp) as exc_info:
        normalize_schedule(raw)

    assert exc_info.value.value == "not-a-time"


def test_try_schedule_returns_tagged_failure() -> None:
    raw = RawManualSchedule(changes=(raw_shedding(start="not-a-time"),))

    result = try_normalize_schedule(raw)

    assert result.ok is False
    assert result.value is None
    assert isinstance(result.error, MalformedTimestamp)
    assert result.error.field == "start"


def test_try_schedule_returns_tagged_success() -> None:
    result = try_normalize_schedule(sample_raw_schedule())

    assert result.ok is True
    assert len(result.value.changes) == 2
    assert len(result.value.historical_changes) == 1


def test_try_monthly_many_reports_first_failure() -> None:
    normalizer = ScheduleNormalizer()

    result = normalizer.try_monthly_many(
        [raw_monthly(), raw_monthly(finish_time="1:00"), raw_monthly(start_time="bad")]
    )

    assert result.ok is False
    assert isinstance(result.error, MalformedTimeOfDay)
    assert result.error.value == "1:00"


def test_try_monthly_many_returns_tagged_success() -> None:
    result = ScheduleNormalizer().try_monthly_many([raw_monthly(), raw_monthly("08:00", "09:00")])

    assert result.ok is True
    assert result.error is None
    assert [event.crosses_midnight for event in result.value] == [True, False]
