from __future__ import annotations

import hashlib
import random
import secrets
from typing import Protocol, runtime_checkable

from libtotp.exc import RngUnavailableError

__all__ = ["RandomByteSource", "CSRNGProvider", "HashRNGProvider"]


@runtime_checkable
class RandomByteSource(Protocol):
    def get_random_bytes(self, count: int) -> bytes:
        """return **count** random bytes, raising RngUnavailableError on failure."""
        ...

    def is_cryptographically_secure(self) -> bool:
        """whether this source is fit for generating secrets (a static property)."""
        ...


class CSRNGProvider:
    """random bytes from the operating system's CSPRNG, via :mod:`secrets`."""

    def get_random_bytes(self, count: int) -> bytes:
        try:
            return secrets.token_bytes(count)
        except (OSError, NotImplementedError) as err:
            msg = f"unable to read {count} random bytes from os ({err})"
            raise RngUnavailableError(msg) from err

    def is_cryptographically_secure(self) -> bool:
        return True


class HashRNGProvider:
    """
    random bytes produced by chaining a Mersenne Twister through a hash function.

    **Not** cryptographically secure; kept for environments which
    need a reproducible source (pass **seed**).
    """

    def __init__(self, algorithm: str = "sha256", seed: int | None = None) -> None:
        if algorithm not in hashlib.algorithms_guaranteed or algorithm.startswith(
            "shake_"
        ):
            msg = f"Unsupported algorithm specified: {algorithm!r}"
            raise ValueError(msg)
        self._algorithm = algorithm
        self._rng = random.Random(seed)

    def get_random_bytes(self, count: int) -> bytes:
        result = bytearray()
        state = str(self._rng.getrandbits(32)).encode("ascii")
        for _ in range(count):
            salt = str(self._rng.getrandbits(32)).encode("ascii")
            state = hashlib.new(self._algorithm, state + salt).digest()
            result.append(state[self._rng.randrange(len(state))])
        return bytes(result)

    def is_cryptographically_secure(self) -> bool:
        return False
