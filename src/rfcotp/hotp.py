from typing import Any, Union

from .algorithms import HashAlgorithm
from .otp import OTP, hotp


def generate_from_counter(
    secret: bytes,
    counter: int,
    digits: int = 6,
    algorithm: Any = HashAlgorithm.SHA1,
) -> str:
    """
    The RFC 4226 primitive: a password for a caller supplied counter.

    :param secret: raw key material
    :param counter: unsigned 64-bit moving factor
    :param digits: length of the password, 1 to 9
    :param algorithm: SHA1, SHA256 or SHA512
    :returns: zero-padded password of exactly ``digits`` characters
    """
    return hotp(secret, counter, digits, algorithm)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: Union[bytes, str],
        digits: int = 6,
        algorithm: Any = HashAlgorithm.SHA1,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret, raw bytes or base32
        :param digits: number of integers in the OTP
        :param algorithm: digest algorithm to use in the HMAC
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)
