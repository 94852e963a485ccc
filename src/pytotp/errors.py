class OTPError(Exception):
    """
    Base class for all errors raised by pytotp.
    """


class InvalidSecretError(OTPError, ValueError):
    """
    The secret text is not usable as a base32 shared secret.

    Only raised while constructing an OTP object.
    """


class MalformedSecretError(InvalidSecretError):
    """
    The secret text uses the base32 alphabet but its padding or length
    cannot be decoded to a whole number of bytes.
    """


class MalformedInputError(OTPError, TypeError, ValueError):
    """
    A submitted code is not a string of decimal digits.
    """


class InvalidConfigError(OTPError, ValueError):
    """
    Interval, digits, window or algorithm are out of range.
    """
