"""Step counting from accelerometer samples, and virtual steps from MET.

Samples go through five stages: interpolation onto a 10 ms grid,
Gaussian smoothing, peak scoring, outlier detection and a time threshold
that merges detections closer than 200 ms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from itertools import islice, pairwise
from typing import Iterable

_INTERPOLATION_TIME = timedelta(milliseconds=10)

_FILTER_LENGTH = 13
_FILTER_STD = 0.35
_FILTER_COEF = tuple(
    math.e
    ** (
        -0.5
        * (
            (i - (_FILTER_LENGTH - 1) / 2.0)
            / (_FILTER_STD * (_FILTER_LENGTH - 1) / 2.0)
        )
        ** 2
    )
    for i in range(_FILTER_LENGTH)
)
_FILTER_SUM = sum(_FILTER_COEF)

_SCORING_SIZE = 35

_INITIAL_LENGTH = 15
_DETECTION_THRESHOLD = 1.2

_TIME_THRESHOLD = timedelta(milliseconds=200)

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Accelerometer:
    """An accelerometer sample taken at ``timestamp``."""

    timestamp: timedelta
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class DataPoint:
    """A scalar signal value at ``timestamp``."""

    magnitude: float
    timestamp: timedelta

    @classmethod
    def from_accelerometer(cls, sample: Accelerometer) -> DataPoint:
        """Point holding the magnitude of the acceleration vector."""
        magnitude = math.sqrt(sample.x * sample.x + sample.y * sample.y + sample.z * sample.z)
        return cls(magnitude=magnitude, timestamp=sample.timestamp)


def _millis(duration: timedelta) -> int:
    return duration // timedelta(milliseconds=1)


def interpolation(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Resample onto a 10 ms grid starting at the first point's time.

    Points must be in non-decreasing timestamp order; fewer than two give
    an empty result.
    """
    points = list(points)
    if len(points) < 2:
        return []
    for earlier, later in pairwise(points):
        if later.timestamp < earlier.timestamp:
            raise ValueError("data points must be ordered by timestamp")

    start = points[0].timestamp
    shifted = [DataPoint(p.magnitude, p.timestamp - start) for p in points]

    output: list[DataPoint] = []
    count = 0
    for first, second in pairwise(shifted):
        time_1, time_2 = first.timestamp, second.timestamp
        number_of_points = (_millis(time_2) - _millis(time_1)) // _millis(_INTERPOLATION_TIME)
        for _ in range(number_of_points):
            interp_time = count * _INTERPOLATION_TIME
            if not time_1 <= interp_time < time_2:
                # The grid position only moves on a hit, so no later try can hit.
                break
            dt = _millis(time_2 - time_1)
            dv = second.magnitude - first.magnitude
            magnitude = (dv / dt) * _millis(interp_time - time_1) + first.magnitude
            output.append(DataPoint(magnitude=magnitude, timestamp=interp_time))
            count += 1
    return output


def filtering(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Smooth with a 13-point Gaussian window, one point per full window."""
    points = list(points)
    if len(points) < _FILTER_LENGTH:
        return []
    middle = _FILTER_LENGTH // 2
    return [
        DataPoint(
            magnitude=sum(p.magnitude * c for p, c in zip(window, _FILTER_COEF)) / _FILTER_SUM,
            timestamp=window[middle].timestamp,
        )
        for window in (
            points[start : start + _FILTER_LENGTH]
            for start in range(len(points) - _FILTER_LENGTH + 1)
        )
    ]


def scoring(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Score each window's midpoint by its mean excess over its neighbours."""
    points = list(points)
    middle = _SCORING_SIZE // 2
    scored = []
    for start in range(len(points) - _SCORING_SIZE + 1):
        window = points[start : start + _SCORING_SIZE]
        midpoint = window[middle].magnitude
        diff_left = sum(midpoint - p.magnitude for p in window[:middle])
        diff_right = sum(midpoint - p.magnitude for p in window[middle + 1 :])
        scored.append(
            DataPoint(
                magnitude=(diff_right + diff_left) / (_SCORING_SIZE - 1),
                timestamp=window[middle].timestamp,
            )
        )
    return scored


def detection(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Keep points after the first 15 that stand out from those 15.

    Mean and spread come from the first 15 points; a later point is kept
    when it exceeds the mean by more than 1.2 times the spread.
    """
    points = list(points)
    mean = 0.0
    std = 0.0
    for index, point in enumerate(points[:_INITIAL_LENGTH]):
        old_mean = mean
        count = index + 1
        if index == 0:
            mean = point.magnitude
            # The running update divides by zero here; the spread stays
            # undefined until the third point resets it.
            std = math.nan
        elif index == 1:
            mean = point.magnitude
        elif index == 2:
            mean = (mean + point.magnitude) / 2.0
            std = math.sqrt((point.magnitude - mean) ** 2 + (old_mean - mean) ** 2) / 2.0
        else:
            mean = (point.magnitude + (count - 1.0) * mean) / count
            std = math.sqrt(
                (count - 2.0) * std * std / (count - 1.0)
                + (old_mean - mean) ** 2
                + (point.magnitude - mean) ** 2
            )
    return [
        point
        for point in points[_INITIAL_LENGTH:]
        if (point.magnitude - mean) > std * _DETECTION_THRESHOLD
    ]


def _time_threshold(points: list[DataPoint]) -> Iterable[DataPoint]:
    if not points:
        return
    current = points[0]
    for point in islice(points, 1, None):
        if point.timestamp - current.timestamp > _TIME_THRESHOLD:
            current = point
            yield point
        elif point.magnitude > current.magnitude:
            current = point


def time_threshold(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Keep a point only when it comes over 200 ms after the strongest recent one."""
    return list(_time_threshold(list(points)))


def steps_count(samples: Iterable[Accelerometer]) -> int:
    """Number of steps found in accelerometer samples ordered by time."""
    points = interpolation(DataPoint.from_accelerometer(s) for s in samples)
    points = filtering(points)
    points = scoring(points)
    points = detection(points)
    return len(time_threshold(points))


def virtual_steps(met: float, weight: float) -> int:
    """Virtual steps for effort without movement.

    ``met`` is the metabolic equivalent of task and ``weight`` the
    person's weight in kilograms. The result is clamped to the range of
    an unsigned 64-bit count.
    """
    value = math.floor(((met * weight) * 3.5) / 3.0) if math.isfinite(met * weight) else None
    if value is None:
        return _U64_MAX if met * weight == math.inf else 0
    return min(max(value, 0), _U64_MAX)