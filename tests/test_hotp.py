"""RFC 4226 HOTP tests."""

from __future__ import annotations

import base64

import pytest

from pytotp import HOTP, InvalidSecretError, MalformedInputError

RFC4226_SECRET = base64.b32encode(b"12345678901234567890").decode()

# RFC 4226 appendix D
RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.mark.parametrize("count, code", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(count, code):
    hotp = HOTP(RFC4226_SECRET)
    assert hotp.at(count) == code
    assert hotp.verify(code, count)


def test_verify_wrong_counter():
    hotp = HOTP(RFC4226_SECRET)
    assert not hotp.verify("755224", 1)
    assert not hotp.verify("000000", 0)


def test_initial_count_shifts_counter():
    hotp = HOTP(RFC4226_SECRET, initial_count=5)
    assert hotp.at(0) == "254676"
    assert hotp.verify("520489", 4)


def test_verify_rejects_malformed_code():
    hotp = HOTP(RFC4226_SECRET)
    with pytest.raises(MalformedInputError):
        hotp.verify("75522x", 0)
    with pytest.raises(MalformedInputError):
        hotp.verify(755224, 0)


def test_negative_counter():
    hotp = HOTP(RFC4226_SECRET)
    with pytest.raises(ValueError, match="unsigned 64-bit"):
        hotp.at(-1)


def test_counter_upper_bound():
    hotp = HOTP(RFC4226_SECRET)
    assert len(hotp.at(2**64 - 1)) == 6
    with pytest.raises(ValueError):
        hotp.at(2**64)


def test_int_to_bytestring_is_big_endian():
    assert HOTP.int_to_bytestring(1) == b"\x00" * 7 + b"\x01"
    assert HOTP.int_to_bytestring(0x3039) == b"\x00" * 6 + b"\x30\x39"


def test_invalid_secret():
    with pytest.raises(InvalidSecretError):
        HOTP("gezdgnbv")
