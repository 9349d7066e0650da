class OTPError(Exception):
    """
    Base class for every error raised by rfcotp.
    """


class InvalidSecretError(OTPError, ValueError):
    pass


class InvalidTimeError(OTPError, ValueError):
    pass


class InvalidStepError(OTPError, ValueError):
    pass


class InvalidDigitsError(OTPError, ValueError):
    pass


class UnsupportedAlgorithmError(OTPError, ValueError):
    pass


class InvalidCounterError(OTPError, ValueError):
    pass


class DigestTooShortError(OTPError, RuntimeError):
    """
    The digest handed to the truncator cannot hold the 4 bytes selected by
    its own offset. Valid SHA-1/SHA-256/SHA-512 digests never trigger this.
    """
