# fitmetrics

Small, dependency-free helpers for turning raw fitness data into useful
numbers. Durations and timestamps are `datetime.timedelta` values throughout.

## Install

```
pip install fitmetrics
```

To run the test suite:

```
pip install "fitmetrics[test]"
pytest
```

## Modules

### `fitmetrics.heart_rate`

- `ActivityKind` - training zones `VO2`, `ANAEROBIC`, `AEROBIC`, `FAT_BURN`,
  `WARM_UP`; `intensity_coef()` gives 0.9, 0.8, 0.7, 0.6 and 0.5.
- `mhr(age)` - maximum heart rate, `207 - 0.7 * age`.
- `thr(age, rhr, activity=ActivityKind.ANAEROBIC)` - target heart rate:
  `(MHR - RHR) * intensity + RHR`.
- `average_vhr_by_age_for_male(age)` / `average_vhr_by_age_for_female(age)` -
  average heart-rate variability for an age group, as a `timedelta`.

```python
from fitmetrics.heart_rate import ActivityKind, thr

thr(30, 60.0, ActivityKind.AEROBIC)
```

### `fitmetrics.activity_duration`

`heart_activity(heart_rates, age, rhr)` takes `(timestamp, heart_rate)` pairs
or `ActivityRecord`s in any order, sorts them by time and gives each interval
between consecutive samples the zone of the sample that starts it
(`ActivityKind.from_rate`: VO2, anaerobic, aerobic, fat burn, warm up,
resting). The returned `Report` holds one `Activity` per interval and the
total resting and exercise durations; VO2, anaerobic and aerobic count as
exercise (`ActivityKind.is_exercising()`).

```python
from datetime import timedelta
from fitmetrics.activity_duration import heart_activity

report = heart_activity(
    [(timedelta(seconds=0), 60), (timedelta(seconds=10), 180), (timedelta(seconds=20), 70)],
    age=30,
    rhr=60,
)
report.total_exercise_duration
```

### `fitmetrics.pulse_points`

`pulse_points(records)` sums the minutes spent in each `PulseRateCategory`
times its weight (`LOW` 1.0, `MEDIUM` 1.5, `HIGH` 2.0). It accepts
`PulseRecord`s, `(category, duration)` pairs or `Activity` entries from a
report; `PulseRateCategory.from_activity_kind` maps VO2 and anaerobic to high,
warm up and aerobic to medium, fat burn and resting to low.

### `fitmetrics.calories`

`calories_burnt_by_activity_kind(kind, duration, weight)` returns
`minutes * MET * weight / 200`. `kind` is one of:

- an `ActivityMETKind` member (`LIGHT` 1.5, `MEDIUM` 3.0, `MEDIUM_PLUS` 5.0,
  `VIGOROUS` 8.0, `VIGOROUS_PLUS` 10.0);
- a `HeartRate(age, resting_rate, exercise_rate)` estimate (raises
  `ValueError` for an age over 220);
- a `ComplexMet(age, weight, heart_rate, sex)` estimate, with `Sex.MALE` or
  `Sex.FEMALE`;
- a plain number used as a custom MET value.

`met_index(kind)` gives the MET value alone and raises `TypeError` for
anything else.

### `fitmetrics.gps`

- `haversine(longitude_1, latitude_1, longitude_2, latitude_2)` -
  great-circle distance in kilometres on a sphere of radius `R`.
- `movement_from_gps(points)` - a `Movement` (distance, duration, `start` and
  `end` `Location`) between each pair of consecutive `Gps` fixes,
  altitude-corrected when both fixes have one. Raises `ValueError` if the
  fixes are not in timestamp order.
- `steps_from_gps(points, height, upper_threshold_kmphr=None)` - estimated
  steps from a height in metres (step length `0.41 * height`), ignoring
  movements faster than the threshold (20 km/h by default).

### `fitmetrics.steps`

`steps_count(samples)` counts steps in time-ordered `Accelerometer` samples
through five stages, each available on its own over `DataPoint`s:
`interpolation` (10 ms grid), `filtering` (13-point Gaussian), `scoring`
(35-point peak score), `detection` (outliers against the first 15 points) and
`time_threshold` (merges detections within 200 ms).

`virtual_steps(met, weight)` estimates steps from effort when no movement is
recorded: `floor(met * weight * 3.5 / 3)`, clamped to an unsigned 64-bit range.

## What it does not do

The package is a library only: it has no command-line tools and does not read
or write data files. Calorie figures come from the MET formulas above; there
is no trained model for predicting calories.