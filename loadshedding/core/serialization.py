from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from loadshedding.core.constants import MAX_DAY_OF_MONTH
from loadshedding.core.models import (
    ManualSchedule,
    MonthlyShedding,
    RawManualSchedule,
    RawMonthlyShedding,
    RawShedding,
    Shedding,
)
from loadshedding.parsers.errors import InvalidRecord
from loadshedding.parsers.time_parser import format_time_of_day

# Upstream documents spell "finish" as "finsh" so that it lines up with "start".
_FINISH_KEYS = ("finsh", "finish")
_FINISH_TIME_KEYS = ("finsh_time", "finish_time")
_DAY_OF_MONTH_KEYS = ("date_of_month", "day_of_month")


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidRecord(f"{what} must be an object, got {type(data).__name__}", value=data)
    return data


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    raise InvalidRecord(f"Missing required key {keys[0]!r}", field=keys[0])


def _as_str(data: Mapping[str, Any], *keys: str) -> str:
    value = _pick(data, *keys)
    if not isinstance(value, str):
        raise InvalidRecord(f"{keys[0]} must be a string", field=keys[0], value=value)
    return value


def _as_int(data: Mapping[str, Any], *keys: str, minimum: int, maximum: int | None = None) -> int:
    value = _pick(data, *keys)
    # bool is an int subclass but never a valid stage or day.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecord(f"{keys[0]} must be an integer", field=keys[0], value=value)
    if value < minimum or (maximum is not None and value > maximum):
        raise InvalidRecord(f"{keys[0]} {value} is out of range", field=keys[0], value=value)
    return value


def _as_list(data: Mapping[str, Any], key: str, default: Sequence[Any] | None = None) -> Sequence[Any]:
    if key not in data and default is not None:
        return default
    value = _pick(data, key)
    if not isinstance(value, list):
        raise InvalidRecord(f"{key} must be a list", field=key, value=value)
    return value


def raw_shedding_from_mapping(data: Any) -> RawShedding:
    record = _require_mapping(data, "shedding")
    return RawShedding(
        start=_as_str(record, "start"),
        finish=_as_str(record, *_FINISH_KEYS),
        stage=_as_int(record, "stage", minimum=1),
        source=_as_str(record, "source"),
    )


def raw_monthly_from_mapping(data: Any) -> RawMonthlyShedding:
    record = _require_mapping(data, "monthly shedding")
    return RawMonthlyShedding(
        start_time=_as_str(record, "start_time"),
        finish_time=_as_str(record, *_FINISH_TIME_KEYS),
        stage=_as_int(record, "stage", minimum=1),
        day_of_month=_as_int(record, *_DAY_OF_MONTH_KEYS, minimum=1, maximum=MAX_DAY_OF_MONTH),
    )


def raw_schedule_from_mapping(data: Any) -> RawManualSchedule:
    document = _require_mapping(data, "schedule")
    return RawManualSchedule(
        changes=tuple(raw_shedding_from_mapping(item) for item in _as_list(document, "changes")),
        historical_changes=tuple(
            raw_shedding_from_mapping(item)
            for item in _as_list(document, "historical_changes", default=[])
        ),
    )


def shedding_to_payload(shedding: Shedding) -> dict:
    return {
        "start": shedding.start.isoformat(),
        "finish": shedding.finish.isoformat(),
        "stage": shedding.stage,
        "source": shedding.source,
    }


def monthly_to_payload(event: MonthlyShedding) -> dict:
    # Reference dates are placeholders, so only clock times leave the process.
    return {
        "startTime": format_time_of_day(event.start_time),
        "finishTime": format_time_of_day(event.finish_time),
        "stage": event.stage,
        "dayOfMonth": event.day_of_month,
        "goesOverMidnight": event.crosses_midnight,
        "durationMinutes": int(event.duration.total_seconds() // 60),
    }


def schedule_to_payload(schedule: ManualSchedule) -> dict:
    return {
        "changes": [shedding_to_payload(item) for item in schedule.changes],
        "historicalChanges": [shedding_to_payload(item) for item in schedule.historical_changes],
    }
