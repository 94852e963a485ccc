import hashlib
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .errors import InvalidConfigError

ALGORITHMS: Dict[str, Callable[..., Any]] = {
    "SHA1": hashlib.sha1,
    "SHA256": hashlib.sha256,
    "SHA512": hashlib.sha512,
}

# a 31-bit truncated value has at most 10 decimal digits
MAX_DIGITS = 10


def normalize_algorithm(algorithm: Any) -> str:
    """
    Maps ``"sha-256"``, ``"SHA256"``, ``hashlib.sha256`` and friends to the
    canonical name used as a key in :data:`ALGORITHMS`.
    """
    if callable(algorithm):
        for name, digest in ALGORITHMS.items():
            if algorithm is digest:
                return name
        raise InvalidConfigError("Unsupported digest function, must be SHA1, SHA256 or SHA512")

    if not isinstance(algorithm, str):
        raise InvalidConfigError("algorithm must be a str, not {}".format(type(algorithm).__name__))

    name = algorithm.upper().replace("-", "")
    if name not in ALGORITHMS:
        raise InvalidConfigError("Invalid value for algorithm, must be SHA1, SHA256 or SHA512")
    return name


@dataclass(frozen=True)
class TOTPConfig:
    """
    Immutable settings of an OTP engine.

    :param interval: length of a time step in seconds
    :param digits: number of digits in a code
    :param window: number of time steps checked on either side of the
        current one during verification
    :param algorithm: HMAC hash, ``SHA1``, ``SHA256`` or ``SHA512``
    """

    interval: int = 30
    digits: int = 6
    window: int = 0
    algorithm: str = "SHA1"

    def __post_init__(self) -> None:
        for attr in ("interval", "digits", "window"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError("{} must be an int, not {}".format(attr, type(value).__name__))

        if self.interval <= 0:
            raise InvalidConfigError("interval must be positive")
        if not 1 <= self.digits <= MAX_DIGITS:
            raise InvalidConfigError("digits must be between 1 and {}".format(MAX_DIGITS))
        if self.window < 0:
            raise InvalidConfigError("window must not be negative")

        # frozen, so bypass __setattr__ to store the canonical name
        object.__setattr__(self, "algorithm", normalize_algorithm(self.algorithm))

    @property
    def digest(self) -> Callable[..., Any]:
        return ALGORITHMS[self.algorithm]
