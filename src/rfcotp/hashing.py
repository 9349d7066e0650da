import hmac
from typing import Any

from .algorithms import HashAlgorithm
from .errors import InvalidSecretError


def digest(secret: bytes, message: bytes, algorithm: Any = HashAlgorithm.SHA1) -> bytes:
    """
    Computes HMAC(secret, message) with the hash selected by ``algorithm``.

    :param secret: raw key material, must not be empty
    :param message: the 8-byte counter representation
    :param algorithm: anything ``HashAlgorithm.coerce`` accepts
    :returns: digest of exactly ``algorithm.digest_size`` bytes
    """
    # Error messages must never include the key itself.
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidSecretError("secret must be bytes, got {}".format(type(secret).__name__))
    if len(secret) == 0:
        raise InvalidSecretError("secret must not be empty")
    algorithm = HashAlgorithm.coerce(algorithm)
    return hmac.new(bytes(secret), message, algorithm.constructor).digest()
