"""File hashing providers."""

from .hashlib_hasher import SUPPORTED_ALGORITHMS, HashlibFileHasher

__all__ = ["SUPPORTED_ALGORITHMS", "HashlibFileHasher"]
