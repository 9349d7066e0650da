import datetime

import pytest

from rfcotp import InvalidCounterError, InvalidStepError, InvalidTimeError, counter_bytes, timecode
from rfcotp.counter import unix_seconds

UTC = datetime.timezone.utc


@pytest.mark.parametrize(
    "for_time, expected",
    [
        (0, 0),
        (29, 0),
        (30, 1),
        (59, 1),
        (1111111109, 37037036),
        (1234567890, 41152263),
        (20000000000, 666666666),
    ],
)
def test_timecode_default_step(for_time, expected):
    assert timecode(for_time) == expected


def test_timecode_accepts_datetimes():
    assert timecode(datetime.datetime(2005, 3, 18, 1, 58, 29, tzinfo=UTC)) == 37037036
    assert timecode(datetime.datetime(2603, 10, 11, 11, 33, 20, tzinfo=UTC)) == 666666666


def test_naive_datetime_is_utc():
    naive = datetime.datetime(2009, 2, 13, 23, 31, 30)
    assert unix_seconds(naive) == 1234567890
    assert unix_seconds(naive.replace(tzinfo=UTC)) == 1234567890


def test_aware_datetime_is_converted_to_utc():
    plus_two = datetime.timezone(datetime.timedelta(hours=2))
    assert unix_seconds(datetime.datetime(2009, 2, 14, 1, 31, 30, tzinfo=plus_two)) == 1234567890


def test_sub_second_precision_is_floored():
    assert unix_seconds(59.999) == 59
    assert unix_seconds(datetime.datetime(1970, 1, 1, 0, 0, 59, 999999, tzinfo=UTC)) == 59
    assert timecode(29.9) == 0


def test_epoch_shifts_the_counter():
    assert timecode(1059, interval=30, epoch=1000) == 1
    assert timecode(1000, interval=30, epoch=1000) == 0


def test_custom_interval():
    assert timecode(119, interval=60) == 1
    assert timecode(120, interval=60) == 2


def test_time_before_epoch_is_rejected():
    with pytest.raises(InvalidTimeError):
        timecode(999, epoch=1000)
    with pytest.raises(InvalidTimeError):
        timecode(datetime.datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC))
    with pytest.raises(InvalidTimeError):
        timecode(-0.5)


@pytest.mark.parametrize("interval", [0, -30, 1.5, "30", True])
def test_invalid_interval(interval):
    with pytest.raises(InvalidStepError):
        timecode(59, interval=interval)


@pytest.mark.parametrize("for_time", ["59", None, float("nan"), float("inf")])
def test_invalid_time_types(for_time):
    with pytest.raises(InvalidTimeError):
        timecode(for_time)


def test_counter_bytes_are_big_endian():
    assert counter_bytes(0) == b"\x00" * 8
    assert counter_bytes(1) == b"\x00" * 7 + b"\x01"
    assert counter_bytes(0x0102030405060708) == bytes(range(1, 9))
    assert counter_bytes(2**64 - 1) == b"\xff" * 8


@pytest.mark.parametrize("counter", [-1, 2**64, 1.0, True])
def test_counter_bytes_out_of_range(counter):
    with pytest.raises(InvalidCounterError):
        counter_bytes(counter)
