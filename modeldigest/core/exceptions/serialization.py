"""Serialization exceptions - errors raised while digesting a model tree.

Every stage of the pipeline either succeeds completely or raises one of
these. Nothing is retried and no partial manifest is ever returned.

Hierarchy:
    SerializationError
    ├── ModelPathError          model path cannot be resolved or is not a directory
    ├── TraversalError          filesystem error while walking the tree
    ├── SymlinkNotAllowedError  symlink found while symlinks are disallowed
    ├── HashingError            per-file hasher failed
    └── DigestError             manifest entry has a missing or malformed digest
"""

from __future__ import annotations


class SerializationError(Exception):
    """Base exception for model serialization errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ModelPathError(SerializationError):
    """Raised when the model path cannot be used as a tree root.

    This occurs when:
    - The path does not exist or cannot be canonicalized
    - The path exists but is not a directory
    """

    pass


class TraversalError(SerializationError):
    """Raised when listing or inspecting an entry of the tree fails."""

    pass


class SymlinkNotAllowedError(SerializationError):
    """Raised when a symbolic link is encountered with symlinks disallowed.

    Aborts the whole walk, not just the subtree holding the link.
    """

    def __init__(self, path: str):
        super().__init__(
            f"symlink not allowed: {path} (use allow_symlinks to permit links)",
            path=path,
        )


class HashingError(SerializationError):
    """Raised when the per-file hasher fails for the selected file set."""

    pass


class DigestError(SerializationError):
    """Raised when a digest is missing or is not valid hexadecimal."""

    pass
