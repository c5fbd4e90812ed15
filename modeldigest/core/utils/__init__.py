"""Core utilities package."""

from .path_utils import (
    is_ignored,
    matches_ignore_path,
    normalize_ignore_path,
    normalize_ignore_paths,
    to_posix_relative,
)

__all__ = [
    "is_ignored",
    "matches_ignore_path",
    "normalize_ignore_path",
    "normalize_ignore_paths",
    "to_posix_relative",
]
