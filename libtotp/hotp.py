"""libtotp.hotp -- RFC 4226 code derivation"""

from __future__ import annotations

import hmac
import struct

from libtotp.digest import lookup_hash

__all__ = ["compute_code", "truncate"]

_counter_struct = struct.Struct(">Q")
_value_struct = struct.Struct(">I")


def truncate(digest: bytes) -> int:
    """
    RFC 4226 dynamic truncation: derive 31-bit value from HMAC digest.

    last nibble of the digest selects the offset of 4 bytes,
    read as big-endian uint32 with the most significant bit masked off.
    """
    offset = digest[-1] & 0x0F
    part = digest[offset : offset + 4]
    if len(part) < 4:
        # md5 digests are 16 bytes, offsets past 12 run short and yield 0
        return 0
    return _value_struct.unpack(part)[0] & 0x7FFFFFFF


def compute_code(
    key: bytes,
    counter: int,
    digits: int = 6,
    algorithm: str = "sha1",
) -> str:
    """
    derive OTP code from raw key & counter.

    :arg key: secret key as raw bytes.
    :arg counter: non-negative counter, packed as 8 byte big-endian integer.
    :arg digits: number of digits in output.
    :arg algorithm: hash name accepted by :func:`~libtotp.digest.lookup_hash`.

    :returns: code as decimal string, zero-padded to **digits** chars.
    """
    if counter < 0:
        msg = "counter must be >= 0"
        raise ValueError(msg)
    info = lookup_hash(algorithm)
    digest = hmac.new(key, _counter_struct.pack(counter), info.const).digest()
    value = truncate(digest) % (10**digits)
    return f"{value:0{digits}d}"
