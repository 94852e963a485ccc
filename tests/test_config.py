"""Tests for TOTPConfig validation."""

from __future__ import annotations

import dataclasses
import hashlib

import pytest

from pytotp import InvalidConfigError, TOTP, TOTPConfig
from pytotp.config import normalize_algorithm


def test_defaults():
    config = TOTPConfig()
    assert config.interval == 30
    assert config.digits == 6
    assert config.window == 0
    assert config.algorithm == "SHA1"
    assert config.digest is hashlib.sha1


@pytest.mark.parametrize(
    "value, name",
    [
        ("SHA1", "SHA1"),
        ("sha1", "SHA1"),
        ("SHA-1", "SHA1"),
        ("sha-256", "SHA256"),
        ("SHA512", "SHA512"),
        (hashlib.sha256, "SHA256"),
        (hashlib.sha512, "SHA512"),
    ],
)
def test_algorithm_names(value, name):
    assert normalize_algorithm(value) == name
    assert TOTPConfig(algorithm=value).algorithm == name


@pytest.mark.parametrize("value", ["MD5", "sha3_256", "", hashlib.md5, 1])
def test_unsupported_algorithm(value):
    with pytest.raises(InvalidConfigError):
        TOTPConfig(algorithm=value)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"interval": 0},
        {"interval": -30},
        {"interval": 1.5},
        {"digits": 0},
        {"digits": 11},
        {"digits": "6"},
        {"window": -1},
        {"window": True},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(InvalidConfigError):
        TOTPConfig(**kwargs)


def test_invalid_config_is_value_error():
    with pytest.raises(ValueError):
        TOTP("JBSWY3DPEHPK3PXP", digits=11)


def test_frozen():
    config = TOTPConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.window = 3


def test_ten_digits():
    totp = TOTP("JBSWY3DPEHPK3PXP", digits=10)
    assert len(totp.at(59)) == 10
