import pytest

from rfcotp import HashAlgorithm


@pytest.fixture
def sha1_secret():
    return b"12345678901234567890"


@pytest.fixture
def rfc6238_secrets(sha1_secret):
    # RFC 6238 Appendix B repeats the SHA1 seed up to each digest's key length
    return {
        HashAlgorithm.SHA1: sha1_secret,
        HashAlgorithm.SHA256: (sha1_secret * 2)[:32],
        HashAlgorithm.SHA512: (sha1_secret * 4)[:64],
    }
