"""Pulse points: weighted minutes spent in each heart-rate category."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Union

from fitmetrics.activity_duration import Activity, ActivityKind


class PulseRateCategory(enum.Enum):
    """Coarse heart-rate category, valued by its weight."""

    LOW = 1.0
    MEDIUM = 1.5
    HIGH = 2.0

    @classmethod
    def from_activity_kind(cls, kind: ActivityKind) -> PulseRateCategory:
        """Category a heart-rate zone falls into."""
        if kind in (ActivityKind.VO2, ActivityKind.ANAEROBIC):
            return cls.HIGH
        if kind in (ActivityKind.WARM_UP, ActivityKind.AEROBIC):
            return cls.MEDIUM
        return cls.LOW

    def weight(self) -> float:
        """Points earned per minute in this category."""
        return float(self.value)


@dataclass(frozen=True)
class PulseRecord:
    """Time spent in one category."""

    duration: timedelta
    category: PulseRateCategory

    @classmethod
    def from_activity(cls, activity: Activity) -> PulseRecord:
        return cls(
            duration=activity.duration,
            category=PulseRateCategory.from_activity_kind(activity.kind),
        )


PulseLike = Union[PulseRecord, Activity, tuple[PulseRateCategory, timedelta]]


def _to_pulse_record(item: PulseLike) -> PulseRecord:
    if isinstance(item, PulseRecord):
        return item
    if isinstance(item, Activity):
        return PulseRecord.from_activity(item)
    category, duration = item
    return PulseRecord(duration=duration, category=category)


def pulse_points(heart_rates: Iterable[PulseLike]) -> float:
    """Sum of minutes in each category times the category's weight.

    Items are pulse records, activities or ``(category, duration)`` pairs.
    """
    records = [_to_pulse_record(item) for item in heart_rates]
    total = 0.0
    for category in PulseRateCategory:
        duration = sum(
            (r.duration for r in records if r.category is category), timedelta(0)
        )
        total += (duration.total_seconds() / 60.0) * category.weight()
    return total