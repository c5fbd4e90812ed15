"""Services implementing the serialization pipeline."""

from .manifest_builder import ManifestBuilder, serialize
from .path_selector import PathSelector, resolve_model_path
from .root_digest import compute_digest, compute_root_digest, format_digest, parse_digest

__all__ = [
    "ManifestBuilder",
    "PathSelector",
    "compute_digest",
    "compute_root_digest",
    "format_digest",
    "parse_digest",
    "resolve_model_path",
    "serialize",
]
