"""Key hashing algorithms for locating a server for a key."""

from __future__ import annotations

import hashlib
import zlib
from enum import Enum
from typing import Callable, Dict, Iterator, Union

import structlog

from cachehash.core.constants import (
    CRC32_MASK,
    CRC32_SHIFT,
    FNV1_64_INIT,
    FNV_64_PRIME,
    KETAMA_POINT_STRUCT,
    KEY_ENCODING,
    MASK_32,
    MASK_64,
    REFERENCE_VECTORS,
    SIGN_BIT_64,
    UTF16_UNIT_ENCODING,
    VERIFY_PROBE_KEY,
)
from cachehash.core.errors import EncodingError, UnsupportedAlgorithm

logger = structlog.get_logger(__name__)


class HashAlgorithm(str, Enum):
    """
    Known hashing algorithms for locating a server for a key.

    NATIVE is only stable inside one interpreter process; the other three
    produce the same value on every platform and in every compatible client.
    """

    NATIVE = "native"
    CRC32 = "crc32"
    FNV1_64 = "fnv1_64"
    KETAMA_MD5 = "ketama_md5"

    def hash(self, key: str) -> int:
        """
        Compute the hash for the given key.

        Returns:
            Non-negative integer below 2**64.

        Raises:
            TypeError: key is not a str.
            EncodingError: key has no UTF-8 form (CRC32 and KETAMA_MD5 only).
            UnsupportedAlgorithm: MD5 is unavailable (KETAMA_MD5 only).
        """
        if not isinstance(key, str):
            raise TypeError(f"key must be str, not {type(key).__name__}")
        return abs64(_HASH_FUNCTIONS[self](key))

    @property
    def portable(self) -> bool:
        """Whether values match across processes and client implementations."""
        return self is not HashAlgorithm.NATIVE

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Resolve an algorithm from its value, member name or legacy alias."""
        if not isinstance(name, str):
            raise TypeError(f"algorithm name must be str, not {type(name).__name__}")
        normalized = name.strip().lower()
        resolved = _ALIASES.get(normalized)
        if resolved is None:
            valid = ", ".join(sorted(_ALIASES))
            raise ValueError(f"Unknown hash algorithm {name!r}; expected one of: {valid}")
        return resolved


def abs64(value: int) -> int:
    """
    Absolute value of ``value`` read as a signed 64-bit integer.

    The signed minimum (0x8000000000000000) has no positive counterpart and
    is returned as the same bit pattern, mirroring two's-complement abs().
    """
    value &= MASK_64
    if value & SIGN_BIT_64:
        value = -(value - (1 << 64)) & MASK_64
    return value


def _encode(algorithm: HashAlgorithm, key: str) -> bytes:
    try:
        return key.encode(KEY_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(algorithm.value, key, exc.reason) from exc


def _utf16_units(key: str) -> Iterator[int]:
    # Lone surrogates are kept as their own code unit.
    data = key.encode(UTF16_UNIT_ENCODING, "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def _native(key: str) -> int:
    # Salted per process by PYTHONHASHSEED; never share these values.
    return hash(key)


def _crc32(key: str) -> int:
    rv = zlib.crc32(_encode(HashAlgorithm.CRC32, key)) & MASK_32
    return (rv >> CRC32_SHIFT) & CRC32_MASK


def _fnv1_64(key: str) -> int:
    # FNV-1: multiply, then xor.
    rv = FNV1_64_INIT
    for unit in _utf16_units(key):
        rv = (rv * FNV_64_PRIME) & MASK_64
        rv ^= unit
    return rv


def _new_md5() -> "hashlib._Hash":
    try:
        return hashlib.md5(usedforsecurity=False)
    except ValueError as exc:
        raise UnsupportedAlgorithm(HashAlgorithm.KETAMA_MD5.value, str(exc)) from exc


def _ketama_md5(key: str) -> int:
    md5 = _new_md5()
    md5.update(_encode(HashAlgorithm.KETAMA_MD5, key))
    (rv,) = KETAMA_POINT_STRUCT.unpack_from(md5.digest())
    return rv


_HASH_FUNCTIONS: Dict[HashAlgorithm, Callable[[str], int]] = {
    HashAlgorithm.NATIVE: _native,
    HashAlgorithm.CRC32: _crc32,
    HashAlgorithm.FNV1_64: _fnv1_64,
    HashAlgorithm.KETAMA_MD5: _ketama_md5,
}

_ALIASES: Dict[str, HashAlgorithm] = {
    **{algorithm.value: algorithm for algorithm in HashAlgorithm},
    "native_hash": HashAlgorithm.NATIVE,
    "crc32_hash": HashAlgorithm.CRC32,
    "crc": HashAlgorithm.CRC32,
    "fnv": HashAlgorithm.FNV1_64,
    "fnv_hash": HashAlgorithm.FNV1_64,
    "fnv1_64_hash": HashAlgorithm.FNV1_64,
    "ketama": HashAlgorithm.KETAMA_MD5,
    "ketama_hash": HashAlgorithm.KETAMA_MD5,
    "md5": HashAlgorithm.KETAMA_MD5,
}


def hash_key(algorithm: Union[HashAlgorithm, str], key: str) -> int:
    """Hash ``key`` with ``algorithm`` (a member or any name from_name accepts)."""
    if not isinstance(algorithm, HashAlgorithm):
        algorithm = HashAlgorithm.from_name(algorithm)
    return algorithm.hash(key)


def verify_algorithms() -> None:
    """
    Check every algorithm against its reference vector.

    Run once at startup; any failure raises UnsupportedAlgorithm.
    """
    for algorithm in HashAlgorithm:
        try:
            value = algorithm.hash(VERIFY_PROBE_KEY)
        except UnsupportedAlgorithm as exc:
            logger.error("md5_unavailable", algorithm=algorithm.value, error=exc.reason)
            raise

        expected = REFERENCE_VECTORS.get(algorithm.value)
        if expected is not None and value != expected:
            logger.error(
                "hash_reference_mismatch",
                algorithm=algorithm.value,
                expected=expected,
                actual=value,
            )
            raise UnsupportedAlgorithm(
                algorithm.value,
                f"reference vector mismatch (expected {expected}, got {value})",
            )

    logger.debug(
        "hash_algorithms_verified",
        algorithms=[algorithm.value for algorithm in HashAlgorithm],
    )


__all__ = ["HashAlgorithm", "abs64", "hash_key", "verify_algorithms"]
