"""FileHasher protocol for modeldigest - abstract per-file hashing capability."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class FileHasher(Protocol):
    """Hashes a batch of files with a chosen set of algorithms.

    Implementations may parallelize internally but must only return once
    every file has been hashed. Any failure aborts the whole batch.
    """

    def hash_files(
        self, paths: Sequence[Path], algorithms: Sequence[str]
    ) -> dict[Path, dict[str, str]]:
        """Hash each file with every requested algorithm.

        Args:
            paths: Absolute paths of regular files
            algorithms: Algorithm names such as "sha256"

        Returns:
            Mapping from each input path (as given) to a mapping from
            algorithm name to lowercase hex digest

        Raises:
            OSError: If a file cannot be read
            ValueError: If an algorithm is not supported
        """
        ...
