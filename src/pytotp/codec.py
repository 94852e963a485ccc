import base64
import binascii
from typing import Any

from .errors import MalformedSecretError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="

_ALPHABET_SET = frozenset(ALPHABET)


def encode(data: bytes) -> str:
    """
    Encodes raw bytes as RFC 4648 base32 text, padded with ``=`` to a
    multiple of 8 characters.

    :param data: secret bytes, may be empty
    :returns: uppercase base32 text
    """
    return base64.b32encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decodes base32 text back to bytes.

    Decoding is case-sensitive. Text whose length is not a multiple of 8 is
    padded first, since authenticator apps usually drop the padding.

    :param text: base32 text
    :returns: secret bytes
    :raises MalformedSecretError: on characters outside the alphabet or
        structurally invalid padding
    """
    if not isinstance(text, str):
        raise MalformedSecretError("secret must be a str, not {}".format(type(text).__name__))

    data = text.rstrip(PAD)
    for char in data:
        if char not in _ALPHABET_SET:
            raise MalformedSecretError("Non-base32 character {!r} in secret".format(char))

    missing_padding = len(text) % 8
    if missing_padding != 0:
        text += PAD * (8 - missing_padding)

    try:
        return base64.b32decode(text, casefold=False)
    except binascii.Error as exc:
        raise MalformedSecretError("Invalid base32 padding") from exc


def is_valid_secret_text(text: Any) -> bool:
    """
    Syntactic check: at least one ``A-Z``/``2-7`` character followed only by
    ``=`` padding.
    """
    if not isinstance(text, str):
        return False

    data = text.rstrip(PAD)
    if not data:
        return False
    # any "=" left in data sits before an alphabet character
    return all(char in _ALPHABET_SET for char in data)


class SecretCodec(object):
    """
    Namespace for the base32 secret codec.
    """

    alphabet = ALPHABET

    encode = staticmethod(encode)
    decode = staticmethod(decode)
    is_valid_secret_text = staticmethod(is_valid_secret_text)
