import random
from datetime import timedelta

import pytest

from fitmetrics.steps import (
    Accelerometer,
    DataPoint,
    detection,
    filtering,
    interpolation,
    scoring,
    steps_count,
    time_threshold,
    virtual_steps,
)


def _ms(value):
    return timedelta(milliseconds=value)


def _points(magnitudes, step_ms=10, start_ms=0):
    return [DataPoint(m, _ms(start_ms + i * step_ms)) for i, m in enumerate(magnitudes)]


def test_data_point_from_accelerometer_magnitude():
    sample = Accelerometer(_ms(40), 0.0, 0.0, -9.8)
    point = DataPoint.from_accelerometer(sample)
    assert point.magnitude == pytest.approx(9.8)
    assert point.timestamp == _ms(40)


def test_interpolation_needs_two_points():
    assert interpolation([]) == []
    assert interpolation(_points([1.0])) == []


def test_interpolation_starts_at_zero_on_a_10ms_grid():
    source = _points([2.0, 4.0, 3.0, 5.0], step_ms=30, start_ms=5000)
    result = interpolation(source)
    assert result[0].timestamp == timedelta(0)
    assert result[0].magnitude == 2.0
    for index, point in enumerate(result):
        assert point.timestamp == index * _ms(10)
        assert point.timestamp < source[-1].timestamp - source[0].timestamp


def test_interpolation_stays_between_neighbours():
    result = interpolation(_points([0.0, 10.0], step_ms=100))
    magnitudes = [p.magnitude for p in result]
    assert magnitudes == sorted(magnitudes)
    assert all(0.0 <= m < 10.0 for m in magnitudes)


def test_interpolation_of_constant_is_constant():
    result = interpolation(_points([7.5] * 5, step_ms=20))
    assert result
    assert all(p.magnitude == 7.5 for p in result)


def test_interpolation_rejects_decreasing_timestamps():
    points = [DataPoint(1.0, _ms(100)), DataPoint(2.0, _ms(50))]
    with pytest.raises(ValueError):
        interpolation(points)


def test_filtering_too_short_is_empty():
    assert filtering(_points([1.0] * 12)) == []


def test_filtering_constant_signal():
    source = _points([3.0] * 20)
    result = filtering(source)
    assert len(result) == len(source) - 13 + 1
    assert all(p.magnitude == pytest.approx(3.0) for p in result)
    assert [p.timestamp for p in result] == [p.timestamp for p in source[6 : 6 + len(result)]]


def test_filtering_smooths_a_spike():
    magnitudes = [0.0] * 13
    magnitudes[6] = 10.0
    result = filtering(_points(magnitudes))
    assert len(result) == 1
    assert 0.0 < result[0].magnitude < 10.0


def test_scoring_constant_signal_scores_zero():
    source = _points([1.0] * 40)
    result = scoring(source)
    assert len(result) == len(source) - 35 + 1
    assert all(p.magnitude == 0.0 for p in result)
    assert result[0].timestamp == source[17].timestamp


def test_scoring_peak_is_positive_and_valley_negative():
    peak = [0.0] * 35
    peak[17] = 5.0
    valley = [0.0] * 35
    valley[17] = -5.0
    assert scoring(_points(peak))[0].magnitude > 0.0
    assert scoring(_points(valley))[0].magnitude < 0.0


def test_scoring_too_short_is_empty():
    assert scoring(_points([1.0] * 34)) == []


def test_detection_needs_more_than_initial_points():
    assert detection(_points([1.0] * 15)) == []


def test_detection_finds_outlier():
    source = _points([1.0] * 15 + [1.0, 5.0, 1.0])
    assert detection(source) == [source[16]]


def test_time_threshold_empty():
    assert time_threshold([]) == []


def test_time_threshold_merges_close_points():
    points = [
        DataPoint(0.0, _ms(0)),
        DataPoint(1.0, _ms(100)),
        DataPoint(0.5, _ms(250)),
        DataPoint(0.2, _ms(500)),
    ]
    assert time_threshold(points) == [points[3]]


def test_time_threshold_keeps_points_apart():
    rng = random.Random(7)
    points = []
    now = 0
    for _ in range(300):
        now += rng.randint(1, 120)
        points.append(DataPoint(rng.random(), _ms(now)))
    kept = time_threshold(points)
    assert kept
    for earlier, later in zip(kept, kept[1:]):
        assert later.timestamp - earlier.timestamp > _ms(200)


def _spiky_walk(spike_indices, total):
    return [
        Accelerometer(_ms(20 * i), 0.0, 0.0, 20.0 if i in spike_indices else 9.8)
        for i in range(total)
    ]


def test_steps_count_flat_signal_has_no_steps():
    assert steps_count(_spiky_walk(set(), 300)) == 0


def test_steps_count_empty():
    assert steps_count([]) == 0


def test_steps_count_spikes():
    # The first detection only seeds the threshold stage, so five spikes
    # give four steps.
    samples = _spiky_walk({50, 100, 150, 200, 250}, 300)
    assert steps_count(samples) == 4


def test_virtual_steps_zero_and_negative():
    assert virtual_steps(0.0, 70.0) == 0
    assert virtual_steps(-3.0, 70.0) == 0


def test_virtual_steps_value():
    assert virtual_steps(6.0, 1.0) == 7


def test_virtual_steps_symmetric_and_monotonic():
    assert virtual_steps(3.0, 80.0) == virtual_steps(80.0, 3.0)
    assert virtual_steps(3.0, 80.0) <= virtual_steps(4.0, 80.0)