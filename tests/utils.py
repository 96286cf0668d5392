from __future__ import annotations

#: RFC 6238 reference secrets, base32 of "1234567890" repeated to the digest size
RFC_SECRET_SHA1 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
RFC_SECRET_SHA256 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZA"
RFC_SECRET_SHA512 = (
    "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
    "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNA"
)

SECRET1 = "VMR466AB62ZBOKHE"


class SequentialRNGProvider:
    """returns bytes 0, 1, 2, ... so generated secrets are predictable"""

    def __init__(self, secure: bool = False) -> None:
        self._secure = secure
        self.requested: list[int] = []

    def get_random_bytes(self, count: int) -> bytes:
        self.requested.append(count)
        return bytes(idx % 256 for idx in range(count))

    def is_cryptographically_secure(self) -> bool:
        return self._secure


class FixedTimeProvider:
    def __init__(self, time: int) -> None:
        self.time = time

    def now(self) -> int:
        return self.time


class EchoQRProvider:
    """'renders' the text itself, so the data uri can be inspected"""

    def render(self, text: str, size: int) -> tuple[bytes, str]:
        return f"{text}@{size}".encode(), "test/test"
