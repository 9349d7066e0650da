import enum
import hashlib
from typing import Any, Callable, NamedTuple

from .errors import UnsupportedAlgorithmError


class _HashSpec(NamedTuple):
    digest_size: int
    constructor: Callable[..., Any]


class HashAlgorithm(enum.Enum):
    """
    The hash families allowed by RFC 6238.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        return _HASHES[self].digest_size

    @property
    def constructor(self) -> Callable[..., Any]:
        return _HASHES[self].constructor

    @classmethod
    def coerce(cls, value: Any) -> "HashAlgorithm":
        """
        Resolves an algorithm given as a member, a name or a hashlib constructor.

        :param value: ``HashAlgorithm.SHA256``, ``"SHA256"``, ``"sha-256"`` or ``hashlib.sha256``
        :returns: the matching member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "").replace("_", "")
            try:
                return cls[name]
            except KeyError:
                pass
        else:
            for algorithm, entry in _HASHES.items():
                if value is entry.constructor:
                    return algorithm
        raise UnsupportedAlgorithmError("Invalid value for algorithm, must be SHA1, SHA256 or SHA512")


_HASHES = {
    HashAlgorithm.SHA1: _HashSpec(20, hashlib.sha1),
    HashAlgorithm.SHA256: _HashSpec(32, hashlib.sha256),
    HashAlgorithm.SHA512: _HashSpec(64, hashlib.sha512),
}
