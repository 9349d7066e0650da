from typing import Any, Union

from . import counter
from .algorithms import HashAlgorithm
from .counter import Timestamp
from .otp import OTP, hotp


def generate_password(
    secret: bytes,
    for_time: Timestamp,
    interval: int = 30,
    digits: int = 6,
    algorithm: Any = HashAlgorithm.SHA1,
    epoch: int = 0,
) -> str:
    """
    RFC 6238 password for a point in time.

    :param secret: raw key material
    :param for_time: datetime (naive means UTC) or Unix timestamp
    :param interval: time-step width in seconds
    :param digits: length of the password, 1 to 9
    :param algorithm: SHA1, SHA256 or SHA512
    :param epoch: T0 in Unix seconds
    :returns: zero-padded password of exactly ``digits`` characters
    """
    return hotp(secret, counter.timecode(for_time, interval, epoch), digits, algorithm)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: Union[bytes, str],
        digits: int = 6,
        algorithm: Any = HashAlgorithm.SHA1,
        interval: int = 30,
        epoch: int = 0,
    ) -> None:
        """
        :param s: secret, raw bytes or base32
        :param digits: number of integers in the OTP
        :param algorithm: digest algorithm to use in the HMAC
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param epoch: Unix time the intervals are counted from
        """
        # validates interval and epoch against the epoch itself
        counter.timecode(epoch, interval, epoch)
        self.interval = interval
        self.epoch = epoch
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, for_time: Timestamp, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def timecode(self, for_time: Timestamp) -> int:
        """
        Accepts either a timezone naive (UTC) or aware datetime, or a Unix timestamp.
        """
        return counter.timecode(for_time, self.interval, self.epoch)

    def __repr__(self) -> str:
        return "<TOTP digits={} algorithm={} interval={}>".format(self.digits, self.algorithm.value, self.interval)
