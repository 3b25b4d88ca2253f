from datetime import timedelta

import pytest

from fitmetrics.heart_rate import (
    ActivityKind,
    average_vhr_by_age_for_female,
    average_vhr_by_age_for_male,
    mhr,
    thr,
)


@pytest.mark.parametrize(
    ("kind", "coef"),
    [
        (ActivityKind.VO2, 0.9),
        (ActivityKind.ANAEROBIC, 0.8),
        (ActivityKind.AEROBIC, 0.7),
        (ActivityKind.FAT_BURN, 0.6),
        (ActivityKind.WARM_UP, 0.5),
    ],
)
def test_intensity_coef(kind, coef):
    assert kind.intensity_coef() == coef


def test_mhr_at_birth():
    assert mhr(0) == 207.0


def test_mhr_decreases_with_age():
    values = [mhr(age) for age in range(0, 100, 10)]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_thr_equals_rhr_when_no_reserve():
    age = 40
    for kind in ActivityKind:
        assert thr(age, mhr(age), kind) == pytest.approx(mhr(age))


def test_thr_lies_between_rest_and_max():
    age, rhr = 35, 62.0
    for kind in ActivityKind:
        value = thr(age, rhr, kind)
        assert rhr < value < mhr(age)


def test_thr_zone_ordering():
    age, rhr = 30, 60.0
    ordered = [
        ActivityKind.WARM_UP,
        ActivityKind.FAT_BURN,
        ActivityKind.AEROBIC,
        ActivityKind.ANAEROBIC,
        ActivityKind.VO2,
    ]
    values = [thr(age, rhr, kind) for kind in ordered]
    assert values == sorted(values)


def test_thr_default_is_anaerobic():
    assert thr(30, 60.0) == thr(30, 60.0, ActivityKind.ANAEROBIC)


@pytest.mark.parametrize(
    ("age", "ms"),
    [(0, 61), (25, 61), (26, 56), (30, 56), (31, 49), (36, 43), (41, 37), (46, 34), (51, 32), (55, 32), (56, 31), (200, 31)],
)
def test_vhr_male(age, ms):
    assert average_vhr_by_age_for_male(age) == timedelta(milliseconds=ms)


@pytest.mark.parametrize(
    ("age", "ms"),
    [(0, 57), (25, 57), (26, 53), (31, 47), (36, 42), (41, 37), (46, 34), (51, 33), (55, 33), (56, 31), (255, 31)],
)
def test_vhr_female(age, ms):
    assert average_vhr_by_age_for_female(age) == timedelta(milliseconds=ms)