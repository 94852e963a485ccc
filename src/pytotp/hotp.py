from typing import Any, Optional

from . import utils
from .config import TOTPConfig
from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        algorithm: Any = "SHA1",
        name: Optional[str] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash used in the HMAC, ``SHA1`` (the default), ``SHA256`` or ``SHA512``
        :param name: account name
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s, config=TOTPConfig(digits=digits, algorithm=algorithm), name=name)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the given counter.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        :raises MalformedInputError: if ``otp`` is not a string of digits
        """
        return utils.strings_equal(utils.check_code(otp), self.at(counter))
