import base64
import logging
from typing import Any, Union

from . import hashing
from .algorithms import HashAlgorithm
from .counter import counter_bytes
from .errors import DigestTooShortError, InvalidDigitsError, InvalidSecretError

logger = logging.getLogger(__name__)

MIN_DIGITS = 1
MAX_DIGITS = 9


def truncate(digest: bytes) -> int:
    """
    Dynamic truncation from RFC 4226 section 5.3.

    The low nibble of the last byte picks an offset; the 4 bytes found there
    are read big-endian and the top bit is dropped.

    :param digest: HMAC digest
    :returns: 31-bit unsigned integer
    """
    if len(digest) == 0:
        raise DigestTooShortError("digest is empty")
    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        raise DigestTooShortError(
            "digest of {} bytes is too short for offset {}".format(len(digest), offset)
        )
    return int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF


def format_password(value: int, digits: int) -> str:
    """
    Reduces ``value`` modulo 10**digits and left pads it with zeros.
    """
    if isinstance(digits, bool) or not isinstance(digits, int) or not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigitsError(
            "digits must be an integer between {} and {}, got {!r}".format(MIN_DIGITS, MAX_DIGITS, digits)
        )
    return str(value % 10**digits).zfill(digits)


def hotp(secret: bytes, counter: int, digits: int, algorithm: Any) -> str:
    # counter -> digest -> 31-bit value -> password
    mac = hashing.digest(secret, counter_bytes(counter), algorithm)
    return format_password(truncate(mac), digits)


class OTP(object):
    """
    Base class for OTP handlers.

    Holds validated configuration only; every code is computed from scratch.
    """

    def __init__(
        self,
        s: Union[bytes, str],
        digits: int = 6,
        algorithm: Any = HashAlgorithm.SHA1,
    ) -> None:
        """
        :param s: secret, raw bytes or a base32 string
        :param digits: number of integers in the OTP, 1 to 9
        :param algorithm: HashAlgorithm member, algorithm name or hashlib constructor
        """
        # fail at construction rather than on the first code
        format_password(0, digits)
        self.digits = digits
        self.algorithm = HashAlgorithm.coerce(algorithm)
        self.secret = s
        self.byte_secret()

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        logger.debug("generating %d digit %s code for counter %s", self.digits, self.algorithm.value, input)
        return hotp(self.byte_secret(), input, self.digits, self.algorithm)

    def byte_secret(self) -> bytes:
        secret = self.secret
        if isinstance(secret, (bytes, bytearray, memoryview)):
            if len(secret) == 0:
                raise InvalidSecretError("secret must not be empty")
            return bytes(secret)
        if not isinstance(secret, str):
            raise InvalidSecretError("secret must be bytes or a base32 string")
        secret = "".join(secret.split())
        missing_padding = len(secret) % 8
        if missing_padding != 0:
            secret += "=" * (8 - missing_padding)
        try:
            decoded = base64.b32decode(secret, casefold=True)
        except ValueError:
            # binascii.Error for bad alphabet or padding, plain ValueError for non-ASCII text
            raise InvalidSecretError("secret is not valid base32") from None
        if len(decoded) == 0:
            raise InvalidSecretError("secret must not be empty")
        return decoded

    def __repr__(self) -> str:
        return "<{} digits={} algorithm={}>".format(type(self).__name__, self.digits, self.algorithm.value)
