"""libtotp -- TOTP (RFC 6238) two-factor authentication"""

from libtotp.config import TOTPConfig
from libtotp.exc import (
    ClockSkewError,
    ClockUnavailableError,
    ConfigurationError,
    InsecureRandomSourceError,
    InvalidEncodingError,
    QRCodeError,
    RngUnavailableError,
    TwoFactorAuthError,
    TwoFactorAuthSecurityWarning,
)
from libtotp.secret import pretty_secret
from libtotp.totp import TwoFactorAuth

__version__ = "1.0.0"

__all__ = [
    "ClockSkewError",
    "ClockUnavailableError",
    "ConfigurationError",
    "InsecureRandomSourceError",
    "InvalidEncodingError",
    "QRCodeError",
    "RngUnavailableError",
    "TOTPConfig",
    "TwoFactorAuth",
    "TwoFactorAuthError",
    "TwoFactorAuthSecurityWarning",
    "pretty_secret",
]
