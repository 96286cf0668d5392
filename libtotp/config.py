from __future__ import annotations

import dataclasses
import warnings

from libtotp._utils.validation import validate_positive
from libtotp.digest import HashInfo, lookup_hash, norm_hash_name
from libtotp.exc import TwoFactorAuthSecurityWarning

__all__ = ["TOTPConfig"]


@dataclasses.dataclass(frozen=True)
class TOTPConfig:
    """
    immutable TOTP settings, validated on construction.

    :raises ConfigurationError:
        if digits or period aren't positive integers,
        or the algorithm isn't supported.
    """

    digits: int = 6
    period: int = 30
    algorithm: str = "sha1"

    def __post_init__(self) -> None:
        validate_positive(self.digits, "digits")
        validate_positive(self.period, "period")
        # store normalized name, e.g. "SHA-256" -> "sha256"
        object.__setattr__(self, "algorithm", norm_hash_name(self.algorithm))
        if self.algorithm == "md5":
            warnings.warn(
                "md5 is supported for compatibility only; use sha1, sha256 or sha512",
                TwoFactorAuthSecurityWarning,
                stacklevel=3,
            )

    @property
    def hash_info(self) -> HashInfo:
        return lookup_hash(self.algorithm)
