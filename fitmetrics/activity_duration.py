"""Activity report derived from timestamped heart-rate samples.

Maximum heart rate is ``207 - age * 0.7``; a zone starts at
``(MHR - RHR) * intensity + RHR``, rounded down.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from datetime import timedelta
from itertools import pairwise
from operator import attrgetter
from typing import Iterable, Union


@dataclass(frozen=True, order=True)
class ActivityRecord:
    """A heart-rate sample taken at ``timestamp``."""

    heart_rate: int
    timestamp: timedelta


class ActivityKind(enum.Enum):
    """Heart-rate zone of an interval."""

    VO2 = "vo2"
    ANAEROBIC = "anaerobic"
    AEROBIC = "aerobic"
    FAT_BURN = "fat_burn"
    WARM_UP = "warm_up"
    RESTING = "resting"

    def is_exercising(self) -> bool:
        """True for the zones that count as exercise."""
        return self in (ActivityKind.VO2, ActivityKind.ANAEROBIC, ActivityKind.AEROBIC)

    @classmethod
    def from_rate(cls, age: int, rhr: int, rate: int) -> ActivityKind:
        """Classify ``rate`` for a person of ``age`` with resting rate ``rhr``."""
        mhr = 207.0 - (age * 0.7)
        rhr = float(rhr)
        zones = (
            (cls.VO2, 0.9),
            (cls.ANAEROBIC, 0.8),
            (cls.AEROBIC, 0.7),
            (cls.FAT_BURN, 0.6),
            (cls.WARM_UP, 0.5),
        )
        for kind, intensity in zones:
            if rate >= math.floor(((mhr - rhr) * intensity) + rhr):
                return kind
        return cls.RESTING


@dataclass(frozen=True)
class Activity:
    """An interval spent at one heart rate."""

    heart_rate: int
    kind: ActivityKind
    duration: timedelta


@dataclass
class Report:
    """Totals of resting and exercising time, with every interval."""

    total_resting_duration: timedelta = timedelta(0)
    total_exercise_duration: timedelta = timedelta(0)
    activity: list[Activity] = field(default_factory=list)


RecordLike = Union[ActivityRecord, tuple[timedelta, int]]


def _to_record(item: RecordLike) -> ActivityRecord:
    if isinstance(item, ActivityRecord):
        return item
    timestamp, heart_rate = item
    return ActivityRecord(heart_rate=heart_rate, timestamp=timestamp)


def heart_activity(heart_rates: Iterable[RecordLike], age: int, rhr: int) -> Report:
    """Build a report of activity from heart-rate samples.

    Samples are records or ``(timestamp, heart_rate)`` pairs in any order.
    Each interval takes the zone of the sample that starts it.
    """
    records = sorted(map(_to_record, heart_rates), key=attrgetter("timestamp"))
    report = Report()
    for current, following in pairwise(records):
        duration = following.timestamp - current.timestamp
        kind = ActivityKind.from_rate(age, rhr, current.heart_rate)
        if kind.is_exercising():
            report.total_exercise_duration += duration
        else:
            report.total_resting_duration += duration
        report.activity.append(
            Activity(heart_rate=current.heart_rate, kind=kind, duration=duration)
        )
    return report