import logging

from .algorithms import HashAlgorithm as HashAlgorithm
from .counter import counter_bytes as counter_bytes
from .counter import timecode as timecode
from .errors import DigestTooShortError as DigestTooShortError
from .errors import InvalidCounterError as InvalidCounterError
from .errors import InvalidDigitsError as InvalidDigitsError
from .errors import InvalidSecretError as InvalidSecretError
from .errors import InvalidStepError as InvalidStepError
from .errors import InvalidTimeError as InvalidTimeError
from .errors import OTPError as OTPError
from .errors import UnsupportedAlgorithmError as UnsupportedAlgorithmError
from .hashing import digest as digest
from .hotp import HOTP as HOTP
from .hotp import generate_from_counter as generate_from_counter
from .otp import OTP as OTP
from .otp import format_password as format_password
from .otp import truncate as truncate
from .totp import TOTP as TOTP
from .totp import generate_password as generate_password

logging.getLogger(__name__).addHandler(logging.NullHandler())
