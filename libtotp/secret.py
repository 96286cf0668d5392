from __future__ import annotations

import math
from typing import TYPE_CHECKING

from libtotp._utils.base32 import encode_masked
from libtotp._utils.str import group_string
from libtotp.exc import InsecureRandomSourceError, RngUnavailableError

if TYPE_CHECKING:
    from libtotp.providers.rng import RandomByteSource

__all__ = ["create_secret", "pretty_secret"]


def create_secret(
    rng: RandomByteSource,
    bits: int = 80,
    require_crypto_secure: bool = True,
) -> str:
    """
    create new base32 secret holding (at least) **bits** bits of entropy.

    only 5 bits of each random byte are used, so the result has exactly
    ``ceil(bits / 5)`` characters, and no padding.

    :raises InsecureRandomSourceError:
        if **require_crypto_secure** is set, and **rng** isn't cryptographically secure.
    """
    if bits <= 0:
        msg = "bits must be > 0"
        raise ValueError(msg)
    if require_crypto_secure and not rng.is_cryptographically_secure():
        msg = "RNG provider is not cryptographically secure"
        raise InsecureRandomSourceError(msg)

    byte_count = math.ceil(bits / 5)
    data = rng.get_random_bytes(byte_count)
    if len(data) < byte_count:
        msg = f"RNG provider returned {len(data)} bytes, expected {byte_count}"
        raise RngUnavailableError(msg)
    return encode_masked(data[:byte_count])


def pretty_secret(secret: str, sep: str = " ", size: int = 4) -> str:
    """
    format secret for manual entry into an authenticator app.

    >>> pretty_secret("VMR466AB62ZBOKHE")
    'VMR4 66AB 62ZB OKHE'
    """
    return group_string(secret, sep=sep, size=size)
