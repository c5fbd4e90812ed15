"""Interfaces for pluggable modeldigest collaborators."""

from .file_hasher import FileHasher

__all__ = ["FileHasher"]
