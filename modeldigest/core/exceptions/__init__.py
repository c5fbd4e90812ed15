"""Exception types for modeldigest."""

from .serialization import (
    DigestError,
    HashingError,
    ModelPathError,
    SerializationError,
    SymlinkNotAllowedError,
    TraversalError,
)

__all__ = [
    "DigestError",
    "HashingError",
    "ModelPathError",
    "SerializationError",
    "SymlinkNotAllowedError",
    "TraversalError",
]
