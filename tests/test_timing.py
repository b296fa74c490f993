import pytest

from pixi.timing import TimeDuration, Timestamp


def test_default_duration_is_zero():
    assert TimeDuration() == TimeDuration(0)
    assert int(TimeDuration()) == 0


def test_from_seconds_round_trip_int():
    assert TimeDuration.from_seconds(2).seconds() == 2.0


def test_from_seconds_fraction_matches_tick_rate():
    assert TimeDuration.from_seconds(0.2).nanoseconds == 200_000_000


def test_one_second_in_units():
    one = TimeDuration.from_seconds(1)
    assert one.nanoseconds == 1_000_000_000
    assert one.milliseconds() * 1000 == one.microseconds()
    assert one.microseconds() * 1000 == one.nanoseconds


def test_units_truncate_toward_zero():
    assert TimeDuration(999).microseconds() == 0
    assert TimeDuration(-999).microseconds() == 0
    assert TimeDuration(-1_500_000).milliseconds() == -1


def test_arithmetic_round_trip():
    a = TimeDuration(123_456)
    b = TimeDuration(654_321)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 3 == 3 * a
    assert (a * 7) / 7 == a


def test_scaling_shrinks_duration():
    rate = TimeDuration.from_seconds(0.2)
    faster = (rate * 94) / 100
    assert isinstance(faster, TimeDuration)
    assert faster < rate
    assert faster > TimeDuration(0)


def test_duration_ratio():
    a = TimeDuration(500)
    assert a / TimeDuration(250) == 2.0
    assert a // TimeDuration(200) == 2


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        TimeDuration(5) / 0


def test_non_int_rejected():
    with pytest.raises(TypeError):
        TimeDuration(1.5)
    with pytest.raises(TypeError):
        Timestamp("now")


def test_compare_with_int_is_type_error():
    with pytest.raises(TypeError):
        _ = TimeDuration(1) < 2


def test_now_is_non_decreasing():
    first = Timestamp.now()
    second = Timestamp.now()
    assert second - first >= TimeDuration(0)


def test_timestamp_duration_round_trip():
    stamp = Timestamp(10_000)
    step = TimeDuration.from_seconds(1)
    assert (stamp - step) + step == stamp
    assert step + stamp == stamp + step
    assert (stamp + step) - stamp == step


def test_timestamp_int_and_epoch():
    stamp = Timestamp(42)
    assert int(stamp) == 42
    assert stamp.since_epoch == TimeDuration(42)