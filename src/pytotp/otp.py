import hmac
import logging
from typing import Any, Optional

from . import codec
from .config import TOTPConfig
from .errors import InvalidSecretError

log = logging.getLogger(__name__)

MAX_COUNTER = 2**64 - 1


class OTP(object):
    """
    Base class for OTP handlers.

    Holds the decoded shared secret and the settings, and implements the
    RFC 4226 counter-to-code derivation that HOTP and TOTP share.
    """

    def __init__(self, s: str, config: Optional[TOTPConfig] = None, name: Optional[str] = None) -> None:
        """
        :param s: secret in base32 format, uppercase, optionally padded
        :param config: engine settings, defaults to ``TOTPConfig()``
        :param name: label used in ``repr`` only
        :raises InvalidSecretError: if ``s`` is not base32 text
        """
        if not codec.is_valid_secret_text(s):
            raise InvalidSecretError("Invalid base32 secret")

        # MalformedSecretError is an InvalidSecretError, let it propagate
        self._secret = codec.decode(s)
        self.config = config if config is not None else TOTPConfig()
        self.name = name or "Secret"
        log.debug("Created %r", self)

    @property
    def digits(self) -> int:
        return self.config.digits

    @property
    def algorithm(self) -> str:
        return self.config.algorithm

    @property
    def digest(self) -> Any:
        return self.config.digest

    def byte_secret(self) -> bytes:
        return self._secret

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")

    def _hotp(self, counter: int) -> int:
        # RFC 4226 section 5.3
        if not 0 <= counter <= MAX_COUNTER:
            raise ValueError("counter must be an unsigned 64-bit integer")

        hmac_hash = hmac.new(self._secret, self.int_to_bytestring(counter), self.digest).digest()
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        return code % 10**self.digits

    def generate_otp(self, counter: int) -> str:
        """
        :param counter: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        :returns: the code, left-padded with zeros to ``digits`` characters
        """
        return str(self._hotp(counter)).zfill(self.digits)

    def __repr__(self) -> str:
        return "<{} name={!r} algorithm={} digits={}>".format(
            type(self).__name__, self.name, self.algorithm, self.digits
        )
