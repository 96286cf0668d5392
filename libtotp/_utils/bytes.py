import hmac
from typing import Union

StrOrBytes = Union[str, bytes]


def as_bytes(value: StrOrBytes) -> bytes:
    return value.encode("utf8") if isinstance(value, str) else value


def as_str(value: StrOrBytes) -> str:
    return value.decode("utf8") if isinstance(value, bytes) else value


def consteq(left: StrOrBytes, right: StrOrBytes) -> bool:
    """
    compare two strings in time independent of their content.

    only the (non-secret) lengths may leak through timing.
    """
    return hmac.compare_digest(as_bytes(left), as_bytes(right))
