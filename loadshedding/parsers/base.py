from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from loadshedding.core.models import (
    ManualSchedule,
    MonthlyShedding,
    RawManualSchedule,
    RawMonthlyShedding,
)
from loadshedding.parsers.normalizer import Conversion


class Normalizer(Protocol):
    def schedule(self, raw: RawManualSchedule) -> ManualSchedule:
        """Normalize both change collections, failing on the first bad record."""

    def monthly_many(self, raws: Iterable[RawMonthlyShedding]) -> tuple[MonthlyShedding, ...]:
        """Normalize monthly events in order, failing on the first bad record."""

    def try_schedule(self, raw: RawManualSchedule) -> Conversion[ManualSchedule]:
        """Like ``schedule`` but returns the failure instead of raising it."""

    def try_monthly_many(
        self, raws: Iterable[RawMonthlyShedding]
    ) -> Conversion[tuple[MonthlyShedding, ...]]:
        """Like ``monthly_many`` but returns the failure instead of raising it."""
