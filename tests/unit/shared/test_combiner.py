from datetime import timedelta

from shared.telemetry import PairedSample, Sample, combine


def test_missing_secondary_defaults_to_zero(minute):
    read = [Sample(time=minute(1), value=5.0)]

    assert combine(read, []) == [PairedSample(time=minute(1), first=5.0, second=0.0)]


def test_pairs_on_exact_timestamp(minute):
    read = [Sample(time=minute(3), value=1.0), Sample(time=minute(2), value=2.0)]
    write = [Sample(time=minute(2), value=20.0), Sample(time=minute(3), value=10.0)]

    paired = combine(read, write)

    assert [(p.first, p.second) for p in paired] == [(1.0, 10.0), (2.0, 20.0)]


def test_length_follows_primary(minute):
    primary = [Sample(time=minute(i), value=float(i)) for i in range(5)]
    secondary = [Sample(time=minute(i), value=1.0) for i in range(2, 9)]

    paired = combine(primary, secondary)

    assert len(paired) == len(primary)
    assert [p.time for p in paired] == [s.time for s in primary]
    assert [p.second for p in paired] == [0.0, 0.0, 1.0, 1.0, 1.0]


def test_unmatched_secondary_is_dropped(minute):
    paired = combine([], [Sample(time=minute(1), value=4.0)])

    assert paired == []


def test_no_tolerance_window(fixed_now):
    primary = [Sample(time=fixed_now, value=1.0)]
    secondary = [Sample(time=fixed_now + timedelta(seconds=1), value=9.0)]

    assert combine(primary, secondary)[0].second == 0.0


def test_custom_default_marks_gaps(minute):
    paired = combine([Sample(time=minute(1), value=5.0)], [], default=float("nan"))

    assert paired[0].second != paired[0].second  # NaN


def test_duplicate_secondary_timestamp_uses_first(minute):
    secondary = [
        Sample(time=minute(1), value=3.0),
        Sample(time=minute(1), value=4.0),
    ]

    assert combine([Sample(time=minute(1), value=1.0)], secondary)[0].second == 3.0
