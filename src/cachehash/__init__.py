"""cachehash - key hashing strategies for cache server selection."""

from .core import (
    EncodingError,
    HashAlgorithm,
    HashingError,
    UnsupportedAlgorithm,
    hash_key,
    verify_algorithms,
)
from .version import __version__

__all__ = [
    "HashAlgorithm",
    "hash_key",
    "verify_algorithms",
    "HashingError",
    "EncodingError",
    "UnsupportedAlgorithm",
    "__version__",
]
