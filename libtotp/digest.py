"""libtotp.digest -- lookup of the hash algorithms usable for OTP generation"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import re
from typing import Callable, Protocol

from typing_extensions import Buffer

from libtotp.exc import ConfigurationError

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "HashInfo",
    "lookup_hash",
    "norm_hash_name",
]

#: list of supported hash names, used by norm_hash_name()
_known_hash_names = [
    # format: (hashlib name, iana name, other known aliases ...)
    ("sha1", "sha-1"),
    ("sha256", "sha-256", "sha2-256"),
    ("sha512", "sha-512", "sha2-512"),
    # NOTE: md5 is only kept for compatibility with existing deployments
    ("md5", "md5"),
]

#: hashlib names of all supported algorithms
SUPPORTED_ALGORITHMS = tuple(row[0] for row in _known_hash_names)


class HashLike(Protocol):
    """hashlib object, as far as libtotp uses it"""

    @property
    def digest_size(self) -> int: ...

    @property
    def block_size(self) -> int: ...

    def update(self, data: Buffer, /) -> None: ...

    def digest(self) -> bytes: ...


HashConstructor = Callable[..., HashLike]


@dataclasses.dataclass(frozen=True)
class HashInfo:
    """
    record containing information about a supported hash algorithm.

    :attr name: hashlib-compatible name (e.g. ``"sha256"``)
    :attr iana_name: IANA name (e.g. ``"sha-256"``)
    :attr const: hashlib constructor, usable as ``digestmod`` for :mod:`hmac`
    """

    name: str
    iana_name: str
    const: HashConstructor
    digest_size: int
    block_size: int


def norm_hash_name(name: str) -> str:
    """
    normalize hash name to hashlib format (e.g. ``" SHA-256"`` -> ``"sha256"``).

    :raises ConfigurationError: if the algorithm isn't supported.
    """
    if not isinstance(name, str):
        msg = f"algorithm must be a string, not {type(name).__name__}"
        raise ConfigurationError(msg)
    key = re.sub("[_ /]", "-", name.strip().lower())
    for row in _known_hash_names:
        if key in row:
            return row[0]
    msg = f"Unsupported algorithm: {name.strip().lower()}"
    raise ConfigurationError(msg)


@functools.lru_cache(maxsize=None)
def lookup_hash(name: str) -> HashInfo:
    """
    return :class:`HashInfo` for the named algorithm.

    :raises ConfigurationError: if the algorithm isn't supported.
    """
    hashlib_name = norm_hash_name(name)
    const = getattr(hashlib, hashlib_name)
    iana_name = next(row[1] for row in _known_hash_names if row[0] == hashlib_name)
    sample = const()
    return HashInfo(
        name=hashlib_name,
        iana_name=iana_name,
        const=const,
        digest_size=sample.digest_size,
        block_size=sample.block_size,
    )
