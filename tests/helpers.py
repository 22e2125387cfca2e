from __future__ import annotations

from loadshedding.core.models import RawManualSchedule, RawMonthlyShedding, RawShedding


def raw_shedding(
    start: str = "2024-06-01T18:00",
    finish: str = "2024-06-01T20:30",
    stage: int = 4,
    source: str = "https://example.test/announcement",
) -> RawShedding:
    return RawShedding(start=start, finish=finish, stage=stage, source=source)


def raw_monthly(
    start_time: str = "22:00",
    finish_time: str = "00:30",
    stage: int = 4,
    day_of_month: int = 15,
) -> RawMonthlyShedding:
    return RawMonthlyShedding(
        start_time=start_time,
        finish_time=finish_time,
        stage=stage,
        day_of_month=day_of_month,
    )


def sample_raw_schedule() -> RawManualSchedule:
    return RawManualSchedule(
        changes=(
            raw_shedding("2024-06-01T18:00", "2024-06-01T20:30", stage=4),
            raw_shedding("2024-06-02T05:00", "2024-06-02T16:00", stage=2),
        ),
        historical_changes=(raw_shedding("2024-05-20T16:00", "2024-05-21T00:00", stage=6),),
    )


def sample_schedule_document() -> dict:
    return {
        "changes": [
            {
                "start": "2024-06-01T18:00",
                "finsh": "2024-06-01T20:30",
                "stage": 4,
                "source": "https://example.test/a",
            },
            {
                "start": "2024-06-02T05:00",
                "finsh": "2024-06-02T16:00",
                "stage": 2,
                "source": "https://example.test/b",
            },
        ],
        "historical_changes": [
            {
                "start": "2024-05-20T16:00",
                "finsh": "2024-05-21T00:00",
                "stage": 6,
                "source": "https://example.test/c",
            },
        ],
    }
