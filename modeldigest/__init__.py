"""modeldigest: reproducible root digests for model directory trees.

Example:
    >>> from modeldigest import compute_digest
    >>> compute_digest("models/bert")
    'sha256:...'
"""

from modeldigest.core.config import SerializationConfig
from modeldigest.core.exceptions import (
    DigestError,
    HashingError,
    ModelPathError,
    SerializationError,
    SymlinkNotAllowedError,
    TraversalError,
)
from modeldigest.core.models import FileEntry, Manifest
from modeldigest.services import (
    ManifestBuilder,
    PathSelector,
    compute_digest,
    compute_root_digest,
    serialize,
)

__version__ = "0.1.0"

__all__ = [
    "DigestError",
    "FileEntry",
    "HashingError",
    "Manifest",
    "ManifestBuilder",
    "ModelPathError",
    "PathSelector",
    "SerializationConfig",
    "SerializationError",
    "SymlinkNotAllowedError",
    "TraversalError",
    "compute_digest",
    "compute_root_digest",
    "serialize",
]
