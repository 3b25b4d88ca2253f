"""Calories burnt from metabolic equivalents of task (MET)."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import Union


class Sex(enum.Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_bool(cls, value: bool) -> Sex:
        """``True`` is male, ``False`` female."""
        return cls.MALE if value else cls.FEMALE

    def __bool__(self) -> bool:
        return self is Sex.MALE

    def __float__(self) -> float:
        return 1.0 if self is Sex.MALE else 0.0


class ActivityMETKind(enum.Enum):
    """Common activities, valued by their MET index."""

    LIGHT = 1.5  # slow walking or writing
    MEDIUM = 3.0  # medium-speed walking, simple physical activity
    MEDIUM_PLUS = 5.0  # intensive medium activity such as weight lifting
    VIGOROUS = 8.0  # bicycling
    VIGOROUS_PLUS = 10.0  # swimming moderately to hard

    def met_index(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class HeartRate:
    """MET estimated from resting and exercise heart rates."""

    age: int
    resting_rate: float
    exercise_rate: float

    def met_index(self) -> float:
        if self.age > 220:
            raise ValueError(f"age {self.age} exceeds 220")
        reserve = (220 - self.age) - self.resting_rate
        share = (self.exercise_rate - self.resting_rate) / reserve
        return (share * 3.5) + 1.0


@dataclass(frozen=True)
class ComplexMet:
    """MET estimated from age, weight, heart rate and sex."""

    age: int
    weight: float
    heart_rate: int
    sex: Sex

    def met_index(self) -> float:
        sex_factor = 0.0 if self.sex is Sex.MALE else 6.55
        return (
            (self.heart_rate * 0.6309)
            + (self.weight * 0.1988)
            + (self.age * 0.2017)
            - sex_factor
            - 55.0969
        ) / 4.184


MetKind = Union[ActivityMETKind, HeartRate, ComplexMet, float]


def met_index(kind: MetKind) -> float:
    """MET index of an activity kind, a heart-rate estimate or a custom value."""
    if isinstance(kind, (ActivityMETKind, HeartRate, ComplexMet)):
        return kind.met_index()
    if isinstance(kind, bool) or not isinstance(kind, (int, float)):
        raise TypeError(f"unsupported MET kind: {kind!r}")
    return float(kind)


def calories_burnt_by_activity_kind(kind: MetKind, duration: timedelta, weight: float) -> float:
    """Calories burnt by a person of ``weight`` kilograms over ``duration``."""
    minutes = duration.total_seconds() / 60.0
    return (minutes * met_index(kind) * weight) / 200.0