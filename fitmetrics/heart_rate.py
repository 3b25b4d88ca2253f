"""Target heart-rate zones and heart-rate variability reference values.

- THR: target heart rate
- MHR: maximum heart rate
- RHR: resting heart rate
"""

from __future__ import annotations

import enum
from datetime import timedelta


class ActivityKind(enum.Enum):
    """Training zone, valued by its share of the heart-rate reserve."""

    VO2 = 0.9
    ANAEROBIC = 0.8
    AEROBIC = 0.7
    FAT_BURN = 0.6
    WARM_UP = 0.5

    def intensity_coef(self) -> float:
        """Fraction of the heart-rate reserve this zone starts at."""
        return float(self.value)


def mhr(age: int) -> float:
    """Maximum heart rate for a person of ``age`` years."""
    return 207.0 - (age * 0.7)


def thr(age: int, rhr: float, activity: ActivityKind = ActivityKind.ANAEROBIC) -> float:
    """Target heart rate for ``activity`` given age and resting heart rate."""
    return ((mhr(age) - rhr) * activity.intensity_coef()) + rhr


# (exclusive upper age bound, average HRV in milliseconds)
_MALE_VHR = ((26, 61), (31, 56), (36, 49), (41, 43), (46, 37), (51, 34), (56, 32))
_FEMALE_VHR = ((26, 57), (31, 53), (36, 47), (41, 42), (46, 37), (51, 34), (56, 33))
_OLDEST_VHR_MS = 31


def _lookup_vhr(table: tuple[tuple[int, int], ...], age: int) -> timedelta:
    millis = next((ms for limit, ms in table if age < limit), _OLDEST_VHR_MS)
    return timedelta(milliseconds=millis)


def average_vhr_by_age_for_male(age: int) -> timedelta:
    """Average heart-rate variability of men of the given age."""
    return _lookup_vhr(_MALE_VHR, age)


def average_vhr_by_age_for_female(age: int) -> timedelta:
    """Average heart-rate variability of women of the given age."""
    return _lookup_vhr(_FEMALE_VHR, age)