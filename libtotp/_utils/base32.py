from __future__ import annotations

import base64
import re

from libtotp._utils.bytes import StrOrBytes, as_str
from libtotp.exc import InvalidEncodingError

__all__ = [
    "B32_CHARS",
    "b32decode",
    "b32encode",
    "encode_masked",
]

#: RFC 4648 base32 alphabet
B32_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
B32_PAD = "="

#: reverse lookup for b32decode(), char -> 5-bit value
_B32_LOOKUP = {char: idx for idx, char in enumerate(B32_CHARS)}

_invalid_re = re.compile(r"[^A-Z2-7=]")


def encode_masked(source: bytes) -> str:
    """
    map each byte onto the base32 alphabet using its 5 least significant bits.

    this is *not* RFC 4648 encoding: the 3 high bits of every byte are dropped,
    so the output can't be decoded back into ``source``. it's used only to turn
    random bytes into new secrets, one character per byte.
    """
    return "".join(B32_CHARS[value & 31] for value in source)


def b32encode(source: bytes) -> str:
    """encode bytes as padded RFC 4648 base32 string."""
    return base64.b32encode(source).decode("ascii")


def b32decode(value: StrOrBytes) -> bytes:
    """decode RFC 4648 base32 string.

    padding is optional, and ``=`` is ignored wherever it appears.
    only upper case characters are accepted.

    :arg value: base32 string.
    :raises InvalidEncodingError: if string contains chars outside the alphabet.
    :returns: decoded bytes; trailing bits which don't fill a whole byte are dropped.
    """
    try:
        value = as_str(value)
    except UnicodeDecodeError as err:
        raise InvalidEncodingError("Invalid base32 string") from err
    if not value:
        return b""
    if _invalid_re.search(value):
        raise InvalidEncodingError("Invalid base32 string")

    chars = value.replace(B32_PAD, "")
    buffer = 0
    for char in chars:
        buffer = (buffer << 5) | _B32_LOOKUP[char]

    bits = len(chars) * 5
    size = bits // 8
    # discard partial trailing byte
    buffer >>= bits - size * 8
    return buffer.to_bytes(size, "big")
