import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from . import utils
from .config import TOTPConfig
from .otp import OTP

log = logging.getLogger(__name__)

VERIFIED = "TOTP verified"
REJECTED = "Invalid TOTP"


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of :meth:`TOTP.verify`.

    ``offset`` is the number of time steps between the matching code and the
    current one, ``None`` when nothing matched. Truthy iff ``success``.
    """

    success: bool
    message: str
    offset: Optional[int] = None

    def __bool__(self) -> bool:
        return self.success


class TOTP(OTP):
    """
    Handler for time-based OTP counters.

    Codes are returned as strings of exactly ``digits`` characters, zero
    padded on the left, so ``"000045"`` never turns into ``45``. Calling
    :meth:`generate` twice within the same interval returns the same code.
    """

    def __init__(
        self,
        s: str,
        window: int = 0,
        interval: int = 30,
        digits: int = 6,
        algorithm: Any = "SHA1",
        *,
        config: Optional[TOTPConfig] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        :param s: secret in base32 format
        :param window: number of intervals checked before and after the
            current one by :meth:`verify`
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash used in the HMAC, ``SHA1`` (the default), ``SHA256`` or ``SHA512``
        :param config: ready-made settings; overrides the four arguments above
        :param name: account name
        :raises InvalidSecretError: if ``s`` is not valid base32 text
        :raises InvalidConfigError: if any setting is out of range
        """
        if config is None:
            config = TOTPConfig(interval=interval, digits=digits, window=window, algorithm=algorithm)
        super().__init__(s, config=config, name=name)

    @property
    def interval(self) -> int:
        return self.config.interval

    @property
    def window(self) -> int:
        return self.config.window

    def timecode(self, for_time: utils.TimeLike) -> int:
        """
        Accepts a Unix timestamp or a datetime (naive datetimes are local
        time) and returns the corresponding counter value (timecode).
        """
        return int(utils.to_timestamp(for_time) // self.interval)

    def at(self, for_time: utils.TimeLike, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def generate(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    now = generate

    def verify(self, otp: str, for_time: Optional[utils.TimeLike] = None) -> VerificationResult:
        """
        Verifies the OTP passed in against the current time OTP.

        Counters from ``-window`` to ``+window`` steps around the current one
        are tried oldest first; the first match wins. A wrong code is a
        failed result, not an exception.

        :param otp: the OTP to check against
        :param for_time: time to check OTP at (defaults to now)
        :returns: VerificationResult
        :raises MalformedInputError: if ``otp`` is not a string of digits
        """
        code = utils.check_code(otp)
        if for_time is None:
            for_time = time.time()

        current = self.timecode(for_time)
        for offset in range(-self.window, self.window + 1):
            counter = current + offset
            if counter < 0:
                continue
            if utils.strings_equal(code, self.generate_otp(counter)):
                log.debug("%r verified at offset %d", self, offset)
                return VerificationResult(True, VERIFIED, offset)

        log.debug("%r rejected code within window %d", self, self.window)
        return VerificationResult(False, REJECTED)

    def __repr__(self) -> str:
        return "<{} name={!r} algorithm={} digits={} interval={} window={}>".format(
            type(self).__name__, self.name, self.algorithm, self.digits, self.interval, self.window
        )
