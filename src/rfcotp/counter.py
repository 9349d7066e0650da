import datetime
import math
from typing import Union

from .errors import InvalidCounterError, InvalidStepError, InvalidTimeError

MAX_COUNTER = 2**64 - 1

Timestamp = Union[int, float, datetime.datetime]


def unix_seconds(for_time: Timestamp) -> int:
    """
    Whole seconds since the Unix epoch, fractions floored.

    Naive datetimes are taken to be UTC, aware ones are converted to UTC.
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo is None:
            for_time = for_time.replace(tzinfo=datetime.timezone.utc)
        delta = for_time - datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
        # timedelta arithmetic stays exact for dates far from 1970
        return delta.days * 86400 + delta.seconds
    if isinstance(for_time, bool) or not isinstance(for_time, (int, float)):
        raise InvalidTimeError("for_time must be a datetime or a Unix timestamp")
    if isinstance(for_time, float) and not math.isfinite(for_time):
        raise InvalidTimeError("for_time must be finite")
    return math.floor(for_time)


def timecode(for_time: Timestamp, interval: int = 30, epoch: int = 0) -> int:
    """
    Maps a point in time to the RFC 6238 moving factor.

    :param for_time: datetime or Unix timestamp
    :param interval: time-step width in seconds
    :param epoch: T0, the Unix time steps are counted from
    :returns: floor((for_time - epoch) / interval)
    """
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        raise InvalidStepError("interval must be a positive integer, got {!r}".format(interval))
    if isinstance(epoch, bool) or not isinstance(epoch, int):
        raise InvalidTimeError("epoch must be an integer number of seconds")
    elapsed = unix_seconds(for_time) - epoch
    if elapsed < 0:
        raise InvalidTimeError("for_time precedes the epoch")
    return elapsed // interval


def counter_bytes(counter: int) -> bytes:
    """
    Turns a counter into the OATH specified 8-byte big-endian bytestring
    which is fed to the HMAC along with the secret.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidCounterError("counter must be an integer")
    if not 0 <= counter <= MAX_COUNTER:
        raise InvalidCounterError("counter must fit in an unsigned 64-bit integer")
    return counter.to_bytes(8, "big")
