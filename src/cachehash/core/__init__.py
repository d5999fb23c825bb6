"""cachehash core functionality."""

from .algorithms import HashAlgorithm, abs64, hash_key, verify_algorithms
from .errors import EncodingError, HashingError, UnsupportedAlgorithm

__all__ = [
    "HashAlgorithm",
    "abs64",
    "hash_key",
    "verify_algorithms",
    "HashingError",
    "EncodingError",
    "UnsupportedAlgorithm",
]
