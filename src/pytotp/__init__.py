import secrets
from typing import Optional

from . import codec
from .codec import SecretCodec as SecretCodec
from .config import TOTPConfig as TOTPConfig
from .errors import InvalidConfigError as InvalidConfigError
from .errors import InvalidSecretError as InvalidSecretError
from .errors import MalformedInputError as MalformedInputError
from .errors import MalformedSecretError as MalformedSecretError
from .errors import OTPError as OTPError
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .totp import VerificationResult as VerificationResult

MIN_SECRET_BYTES = 10


def generate_secret(label: Optional[str] = None, length: int = MIN_SECRET_BYTES) -> str:
    """
    Issues a new shared secret.

    :param label: optional text (e.g. a site name) appended to the random
        bytes before encoding, to make secrets distinct per site
    :param length: number of random bytes, at least 10
    :returns: padded base32 secret
    """
    if length < MIN_SECRET_BYTES:
        raise ValueError("Secrets should be at least 80 bits")

    secret = secrets.token_bytes(length)
    if label:
        secret += label.encode("utf-8")
    return codec.encode(secret)


def random_base32(length: int = 32) -> str:
    # Note: the otpauth scheme DOES NOT use base32 padding for secret lengths not divisible by 8.
    # Some third-party tools have bugs when dealing with such secrets.
    if length < 32:
        raise ValueError("Secrets should be at least 160 bits")

    return "".join(secrets.choice(codec.ALPHABET) for _ in range(length))
