"""Distances, movements and step estimates from GPS fixes.

Distance between two fixes uses the haversine formula on a sphere of
radius ``R`` kilometres. When both fixes carry an altitude, the height
difference is folded in as the other leg of a right triangle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from itertools import pairwise
from typing import Iterable, Optional

R = 6371.0087714150598
"""Radius of the Earth in kilometres."""

_DEFAULT_SPEED_THRESHOLD_KMPHR = 20.0
_RADIANS_PER_DEGREE = math.pi / 180.0
_STEP_LENGTH_PER_HEIGHT = 0.41


@dataclass(frozen=True)
class Gps:
    """A GPS fix.

    ``timestamp`` is the time since the UNIX epoch; ``altitude`` is in
    metres above the WGS84 reference ellipsoid, when known.
    """

    timestamp: timedelta
    latitude: float
    longitude: float
    altitude: Optional[float] = None


@dataclass(frozen=True, order=True)
class Distance:
    """A distance, stored in kilometres."""

    km: float

    @classmethod
    def from_kilometers(cls, km: float) -> Distance:
        return cls(km)

    def kilometers(self) -> float:
        return self.km

    def meters(self) -> float:
        return self.km * 1000.0


@dataclass(frozen=True)
class Location:
    """A point on the Earth, with an optional altitude in metres."""

    latitude: float
    longitude: float
    altitude: Optional[float] = None

    @classmethod
    def from_gps(cls, gps: Gps) -> Location:
        return cls(latitude=gps.latitude, longitude=gps.longitude, altitude=gps.altitude)


@dataclass(frozen=True)
class Movement:
    """Travel from ``start`` to ``end`` covering ``distance`` in ``duration``."""

    distance: Distance
    duration: timedelta
    start: Location
    end: Location

    def speed_kmhr(self) -> float:
        """Average speed in kilometres per hour."""
        km = self.distance.kilometers()
        hours = self.duration.total_seconds() / 60.0 / 60.0
        if hours == 0.0:
            # Dividing by a zero duration: infinite speed, or undefined when
            # nothing moved either.
            return math.inf if km > 0.0 else math.nan
        return km / hours

    def is_height_corrected(self) -> bool:
        """True when both ends carry an altitude."""
        return self.start.altitude is not None and self.end.altitude is not None


def haversine(
    longitude_1: float, latitude_1: float, longitude_2: float, latitude_2: float
) -> float:
    """Great-circle distance between two points, in kilometres."""
    d_lat = _RADIANS_PER_DEGREE * (latitude_2 - latitude_1)
    d_lon = _RADIANS_PER_DEGREE * (longitude_2 - longitude_1)
    lat_1 = _RADIANS_PER_DEGREE * latitude_1
    lat_2 = _RADIANS_PER_DEGREE * latitude_2

    sin_lat = math.sin(d_lat / 2.0)
    sin_lon = math.sin(d_lon / 2.0)
    a = sin_lat * sin_lat + sin_lon * sin_lon * math.cos(lat_1) * math.cos(lat_2)
    return R * (2.0 * math.asin(math.sqrt(a)))


def _distance_km(first: Gps, second: Gps) -> float:
    flat = haversine(first.longitude, first.latitude, second.longitude, second.latitude)
    if first.altitude is None or second.altitude is None:
        return flat
    rise = (second.altitude - first.altitude) / 1000.0
    return math.sqrt(flat * flat + rise * rise)


def movement_from_gps(data: Iterable[Gps]) -> list[Movement]:
    """Movements between each pair of consecutive fixes.

    Fixes must be in non-decreasing timestamp order.
    """
    movements = []
    for first, second in pairwise(data):
        if second.timestamp < first.timestamp:
            raise ValueError("GPS fixes must be ordered by timestamp")
        movements.append(
            Movement(
                distance=Distance.from_kilometers(_distance_km(first, second)),
                duration=second.timestamp - first.timestamp,
                start=Location.from_gps(first),
                end=Location.from_gps(second),
            )
        )
    return movements


def steps_from_gps(
    data: Iterable[Gps],
    height: float,
    upper_threshold_kmphr: Optional[float] = None,
) -> float:
    """Estimate steps walked from GPS fixes sorted by timestamp.

    ``height`` is the person's height in metres. Movements faster than
    ``upper_threshold_kmphr`` (20 km/h by default), such as cycling or
    driving, are not counted.
    """
    step_length = height * _STEP_LENGTH_PER_HEIGHT
    threshold = (
        _DEFAULT_SPEED_THRESHOLD_KMPHR if upper_threshold_kmphr is None else upper_threshold_kmphr
    )
    return sum(
        (
            float(math.floor(movement.distance.meters() / step_length))
            for movement in movement_from_gps(data)
            if not threshold < movement.speed_kmhr()
        ),
        0.0,
    )