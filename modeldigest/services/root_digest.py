"""Root digest computation.

The root digest is SHA-256 over the raw bytes of every file's SHA-256
digest, concatenated in manifest order:

    root = SHA256(bytes(h_1) || bytes(h_2) || ... || bytes(h_n))

File names do not enter the hash directly; they only fix the order.
"""

from __future__ import annotations

import binascii
import hashlib
import re
from pathlib import Path

from loguru import logger

from modeldigest.core.config.serialization_config import SerializationConfig
from modeldigest.core.constants import DEFAULT_ALGORITHM, DIGEST_PREFIX
from modeldigest.core.exceptions import DigestError
from modeldigest.core.models import Manifest
from modeldigest.interfaces.file_hasher import FileHasher
from modeldigest.services.manifest_builder import ManifestBuilder

_DIGEST_PATTERN = re.compile(r"^(?P<algorithm>[a-z0-9]+):(?P<hex>[0-9a-f]{64})$")


def compute_root_digest(manifest: Manifest) -> str:
    """Fold a manifest into its hex root digest.

    Raises:
        DigestError: If an entry has no sha256 digest or it is not valid hex
    """
    root_hash = hashlib.sha256()
    for entry in manifest.files:
        hex_digest = entry.digest.get(DEFAULT_ALGORITHM)
        if hex_digest is None:
            raise DigestError(
                f"{DEFAULT_ALGORITHM} digest not found for {entry.name}",
                path=entry.name,
            )
        try:
            root_hash.update(binascii.unhexlify(hex_digest))
        except (binascii.Error, ValueError) as e:
            raise DigestError(
                f"failed to decode hash for {entry.name}: {e}", path=entry.name
            ) from e
    return root_hash.hexdigest()


def format_digest(hex_digest: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    return f"{algorithm}:{hex_digest}"


def parse_digest(digest: str) -> tuple[str, str]:
    """Split ``sha256:<hex>`` into its algorithm and hex parts.

    Raises:
        DigestError: If the text is not a sha256 digest of 64 lowercase hex
            characters
    """
    match = _DIGEST_PATTERN.match(digest)
    if match is None or match.group("algorithm") != DEFAULT_ALGORITHM:
        raise DigestError(f"invalid digest {digest!r}: expected {DIGEST_PREFIX}<64 hex>")
    return match.group("algorithm"), match.group("hex")


def compute_digest(
    model_path: str | Path,
    config: SerializationConfig | None = None,
    hasher: FileHasher | None = None,
) -> str:
    """Serialize a model tree and return its root digest as ``sha256:<hex>``."""
    manifest = ManifestBuilder(hasher).serialize(model_path, config)
    root = compute_root_digest(manifest)
    logger.debug(f"Root digest of {manifest.model_name}: {root}")
    return format_digest(root)
