"""Error taxonomy for key hashing."""

from __future__ import annotations

from typing import Optional


class HashingError(Exception):
    """Base class for every error raised by cachehash."""


class EncodingError(HashingError, ValueError):
    """The key cannot be turned into the bytes an algorithm operates on."""

    def __init__(self, algorithm: str, key: str, reason: Optional[str] = None) -> None:
        self.algorithm = algorithm
        self.key = key
        message = f"cannot encode key {key!r} for {algorithm}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedAlgorithm(HashingError, RuntimeError):
    """
    A primitive needed by an algorithm (MD5) is missing or broken.

    Treated as fatal misconfiguration: it is raised by the startup self-check
    and is never worth retrying.
    """

    def __init__(self, algorithm: str, reason: str) -> None:
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"{algorithm} not supported: {reason}")


__all__ = ["HashingError", "EncodingError", "UnsupportedAlgorithm"]
