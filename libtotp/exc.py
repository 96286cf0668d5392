"""libtotp.exc -- exceptions & warnings raised by libtotp"""

__all__ = [
    "TwoFactorAuthError",
    "ConfigurationError",
    "InvalidEncodingError",
    "InsecureRandomSourceError",
    "RngUnavailableError",
    "ClockUnavailableError",
    "ClockSkewError",
    "QRCodeError",
    "TwoFactorAuthSecurityWarning",
]


class TwoFactorAuthError(Exception):
    """Base class for all errors raised by libtotp."""


class ConfigurationError(TwoFactorAuthError, ValueError):
    """
    Raised when a :class:`~libtotp.config.TOTPConfig` is constructed
    with invalid settings (non-positive digits / period, unsupported algorithm).
    """


class InvalidEncodingError(TwoFactorAuthError, ValueError):
    """Raised when a secret isn't a valid (upper case) base32 string."""


class InsecureRandomSourceError(TwoFactorAuthError):
    """
    Raised by secret generation when a cryptographically secure secret
    was requested, but the random source can't guarantee one.
    """


class RngUnavailableError(TwoFactorAuthError):
    """Raised by a random byte source which fails to produce bytes."""


class ClockUnavailableError(TwoFactorAuthError):
    """Raised by a clock source which can't determine the current time."""


class ClockSkewError(TwoFactorAuthError):
    """
    Raised by :meth:`~libtotp.totp.TwoFactorAuth.ensure_correct_time`
    when the local clock drifted too far from a reference clock.
    """


class QRCodeError(TwoFactorAuthError):
    """Raised by QR code providers which can't render an image."""


class TwoFactorAuthSecurityWarning(UserWarning):
    """
    Issued when a setting is accepted for compatibility,
    but offers weaker security than it should (e.g. the md5 algorithm).
    """
