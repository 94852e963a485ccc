import datetime
from hmac import compare_digest
from typing import Any, Union

from .errors import MalformedInputError

_DIGITS = frozenset("0123456789")

TimeLike = Union[int, float, datetime.datetime]


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))


def check_code(code: Any) -> str:
    """
    Checks that a submitted code is a non-empty string of ASCII digits.

    :param code: the code as entered by the user
    :returns: the code, unchanged
    :raises MalformedInputError: on anything else
    """
    if not isinstance(code, str):
        raise MalformedInputError("Invalid input OTP format: expected str, got {}".format(type(code).__name__))
    # str.isdigit() also accepts non-ASCII digits such as "٣"
    if not code or not all(char in _DIGITS for char in code):
        raise MalformedInputError("Invalid input OTP format")
    return code


def to_timestamp(for_time: TimeLike) -> float:
    """
    Unix time in seconds for an int, float or datetime.

    Naive datetimes are interpreted as local time.
    """
    if isinstance(for_time, datetime.datetime):
        return for_time.timestamp()
    if isinstance(for_time, bool) or not isinstance(for_time, (int, float)):
        raise TypeError("for_time must be a number or datetime, not {}".format(type(for_time).__name__))
    return for_time
