"""Thread-pooled file hasher built on hashlib.

Each file is streamed once and fed to every requested algorithm. Files are
hashed concurrently; hash_files() returns only after all of them finished.
"""

from __future__ import annotations

import hashlib
import os
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path

from loguru import logger

from modeldigest.core.constants import HASH_CHUNK_SIZE

# Algorithm registry: name -> hash object factory
SUPPORTED_ALGORITHMS: dict[str, Callable[[], "hashlib._Hash"]] = {
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "blake2b": hashlib.blake2b,
}


def _validate_algorithms(algorithms: Sequence[str]) -> tuple[str, ...]:
    if not algorithms:
        raise ValueError("At least one hash algorithm is required")
    unknown = [name for name in algorithms if name not in SUPPORTED_ALGORITHMS]
    if unknown:
        raise ValueError(
            f"Unsupported hash algorithm(s): {', '.join(unknown)}. "
            f"Must be one of: {', '.join(SUPPORTED_ALGORITHMS)}"
        )
    return tuple(dict.fromkeys(algorithms))


def hash_file(
    path: Path, algorithms: Sequence[str], chunk_size: int = HASH_CHUNK_SIZE
) -> dict[str, str]:
    """Hash a single file with every algorithm in one pass.

    Args:
        path: File to read
        algorithms: Validated algorithm names
        chunk_size: Bytes read per iteration

    Returns:
        Mapping from algorithm name to lowercase hex digest
    """
    hashers = {name: SUPPORTED_ALGORITHMS[name]() for name in algorithms}
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            for h in hashers.values():
                h.update(chunk)
    return {name: h.hexdigest() for name, h in hashers.items()}


class HashlibFileHasher:
    """Default FileHasher implementation."""

    def __init__(
        self, max_workers: int | None = None, chunk_size: int = HASH_CHUNK_SIZE
    ) -> None:
        """Initialize the hasher.

        Args:
            max_workers: Thread pool size (default: min(32, cpu_count + 4))
            chunk_size: Bytes read per iteration when streaming a file
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)
        self.chunk_size = chunk_size

    def hash_files(
        self, paths: Sequence[Path], algorithms: Sequence[str]
    ) -> dict[Path, dict[str, str]]:
        """Hash every path with every algorithm.

        Raises:
            ValueError: If an algorithm is not supported
            OSError: First read failure; pending work is cancelled
        """
        names = _validate_algorithms(algorithms)
        if not paths:
            return {}

        logger.debug(
            f"Hashing {len(paths)} files with {', '.join(names)} "
            f"({self.max_workers} workers)"
        )

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="file-hasher"
        ) as executor:
            futures: dict[Future[dict[str, str]], Path] = {
                executor.submit(hash_file, path, names, self.chunk_size): path
                for path in paths
            }
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()

            results: dict[Path, dict[str, str]] = {}
            for future, path in futures.items():
                if future in done:
                    error = future.exception()
                    if error is not None:
                        raise error
                    results[path] = future.result()

        # Only reached when nothing failed, so every future completed
        return results
