"""Manifest construction for model serialization."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from modeldigest.core.config.serialization_config import SerializationConfig
from modeldigest.core.constants import DEFAULT_ALGORITHM
from modeldigest.core.exceptions import HashingError
from modeldigest.core.models import FileEntry, Manifest
from modeldigest.core.utils.path_utils import to_posix_relative
from modeldigest.interfaces.file_hasher import FileHasher
from modeldigest.services.path_selector import PathSelector


class ManifestBuilder:
    """Turns a selected file set into a sorted manifest of SHA-256 digests.

    The hasher is injected so tests can run against a fake without touching
    the filesystem hash pipeline.
    """

    def __init__(self, hasher: FileHasher | None = None):
        if hasher is None:
            from modeldigest.providers.hashing import HashlibFileHasher

            hasher = HashlibFileHasher()
        self.hasher = hasher

    def build(self, root: Path, paths: Sequence[Path]) -> Manifest:
        """Hash ``paths`` and build the manifest for the tree at ``root``.

        Args:
            root: Resolved absolute tree root
            paths: Absolute paths of the selected regular files

        Returns:
            Manifest named after ``root`` with entries sorted by relative path

        Raises:
            HashingError: If the hasher fails or omits a selected file
        """
        paths = list(paths)
        try:
            file_hashes = self.hasher.hash_files(paths, (DEFAULT_ALGORITHM,))
        except Exception as e:
            raise HashingError(
                f"failed to hash {len(paths)} files under {root}: {e}",
                path=str(root),
            ) from e

        entries = []
        for path in paths:
            digest = file_hashes.get(path)
            if digest is None or DEFAULT_ALGORITHM not in digest:
                raise HashingError(
                    f"hasher returned no {DEFAULT_ALGORITHM} digest for {path}",
                    path=str(path),
                )
            entries.append(
                FileEntry(
                    name=to_posix_relative(path, root),
                    digest={DEFAULT_ALGORITHM: digest[DEFAULT_ALGORITHM]},
                )
            )

        manifest = Manifest.from_entries(root.name, entries)
        logger.debug(f"Built manifest for {manifest.model_name} with {len(manifest)} files")
        return manifest

    def serialize(
        self, model_path: str | Path, config: SerializationConfig | None = None
    ) -> Manifest:
        """Select, hash and collect the files of a model tree."""
        selector = PathSelector(config)
        root = selector.resolve_root(model_path)
        return self.build(root, selector.select(root))


def serialize(
    model_path: str | Path,
    config: SerializationConfig | None = None,
    hasher: FileHasher | None = None,
) -> Manifest:
    """Build the manifest of a model tree with the given configuration."""
    return ManifestBuilder(hasher).serialize(model_path, config)
