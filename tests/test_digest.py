import hashlib

import pytest

from libtotp.digest import SUPPORTED_ALGORITHMS, lookup_hash, norm_hash_name
from libtotp.exc import ConfigurationError


def test_supported_algorithms():
    assert set(SUPPORTED_ALGORITHMS) == {"sha1", "sha256", "sha512", "md5"}


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("sha1", "sha1"),
        ("SHA1", "sha1"),
        (" sha1 ", "sha1"),
        ("SHA-1", "sha1"),
        ("sha256", "sha256"),
        ("SHA-256", "sha256"),
        ("sha2_256", "sha256"),
        ("sha512", "sha512"),
        ("Sha-512", "sha512"),
        ("MD5", "md5"),
    ],
)
def test_norm_hash_name(name: str, expected: str) -> None:
    assert norm_hash_name(name) == expected


@pytest.mark.parametrize("name", ["xxx", "sha224", "sha-333", "md4", ""])
def test_norm_hash_name_unsupported(name: str) -> None:
    with pytest.raises(ConfigurationError, match="Unsupported algorithm"):
        norm_hash_name(name)


def test_norm_hash_name_wrong_type():
    with pytest.raises(ConfigurationError):
        norm_hash_name(256)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("name", "digest_size", "block_size"),
    [
        ("sha1", 20, 64),
        ("sha256", 32, 64),
        ("sha512", 64, 128),
    ],
)
def test_lookup_hash(name: str, digest_size: int, block_size: int) -> None:
    info = lookup_hash(name)
    assert info.name == name
    assert info.const is getattr(hashlib, name)
    assert info.digest_size == digest_size
    assert info.block_size == block_size


def test_lookup_hash_iana_name():
    assert lookup_hash("SHA256").iana_name == "sha-256"
