"""Path selection for model serialization.

Walks a model tree and decides exactly which regular files contribute to the
manifest. The walk is depth-first over an explicit stack of directories;
ignored directories are pruned before they are listed.
"""

from __future__ import annotations

import os
import stat
from enum import Enum, auto
from pathlib import Path

from loguru import logger

from modeldigest.core.config.serialization_config import SerializationConfig
from modeldigest.core.constants import GIT_PATHS
from modeldigest.core.exceptions import (
    ModelPathError,
    SymlinkNotAllowedError,
    TraversalError,
)
from modeldigest.core.utils.path_utils import (
    is_ignored,
    normalize_ignore_paths,
    to_posix_relative,
)


class Visit(Enum):
    """Outcome of visiting a single tree entry."""

    INCLUDE = auto()  # regular file to hash
    DESCEND = auto()  # directory to walk into
    SKIP = auto()  # ignored file, pruned directory, or special file


def resolve_model_path(model_path: str | Path) -> Path:
    """Resolve a model path to its canonical absolute form.

    Raises:
        ModelPathError: If the path does not exist, cannot be resolved, or is
            not a directory
    """
    try:
        root = Path(model_path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ModelPathError(
            f"failed to resolve model path {model_path}: {e}", path=str(model_path)
        ) from e

    if not root.is_dir():
        raise ModelPathError(
            f"model path is not a directory: {root}", path=str(root)
        )
    return root


class PathSelector:
    """Selects the regular files of a model tree that must be hashed.

    Examples:
        >>> selector = PathSelector(SerializationConfig.default())
        >>> root = selector.resolve_root("models/bert")
        >>> files = selector.select(root)
    """

    def __init__(self, config: SerializationConfig | None = None):
        self.config = config if config is not None else SerializationConfig.default()

    def resolve_root(self, model_path: str | Path) -> Path:
        return resolve_model_path(model_path)

    def effective_ignore_paths(self, root: Path) -> list[str]:
        """Caller specifiers plus the git paths, normalized against ``root``."""
        ignore_paths: list[str | Path] = list(self.config.ignore_paths)
        if self.config.ignore_git_paths:
            ignore_paths.extend(root / name for name in GIT_PATHS)
        return normalize_ignore_paths(ignore_paths, root)

    def select(self, model_path: str | Path) -> list[Path]:
        """Return absolute paths of every regular file to hash.

        Order follows the walk and is not meaningful; the manifest builder
        sorts entries.

        Raises:
            ModelPathError: If the model path is unusable
            SymlinkNotAllowedError: On the first symlink when symlinks are
                disallowed
            TraversalError: On any filesystem error during the walk
        """
        root = self.resolve_root(model_path)
        ignore_paths = self.effective_ignore_paths(root)
        logger.debug(f"Selecting files under {root} (ignoring {ignore_paths})")

        selected: list[Path] = []
        if is_ignored(".", ignore_paths):
            logger.debug(f"Model root {root} is itself ignored")
            return selected

        # Each stack item carries the resolved directories on its descent path
        stack: list[tuple[Path, frozenset[str]]] = [
            (root, frozenset({str(root)}))
        ]
        while stack:
            directory, ancestors = stack.pop()
            for entry_path in self._list_directory(directory):
                outcome = self._visit(entry_path, root, ignore_paths)
                if outcome is Visit.INCLUDE:
                    selected.append(entry_path)
                elif outcome is Visit.DESCEND:
                    target = self._directory_identity(entry_path)
                    if target in ancestors:
                        logger.warning(
                            f"Skipping symlinked directory {entry_path}: "
                            f"it loops back to {target}"
                        )
                        continue
                    stack.append((entry_path, ancestors | {target}))

        logger.debug(f"Selected {len(selected)} files under {root}")
        return selected

    def _visit(self, path: Path, root: Path, ignore_paths: list[str]) -> Visit:
        """Classify one entry of the tree."""
        try:
            link_stat = path.lstat()
        except OSError as e:
            raise TraversalError(
                f"failed to stat {path}: {e}", path=str(path)
            ) from e

        mode = link_stat.st_mode
        if stat.S_ISLNK(mode):
            if not self.config.allow_symlinks:
                raise SymlinkNotAllowedError(str(path))
            try:
                mode = path.stat().st_mode
            except OSError as e:
                raise TraversalError(
                    f"failed to follow symlink {path}: {e}", path=str(path)
                ) from e

        if stat.S_ISDIR(mode):
            if is_ignored(to_posix_relative(path, root), ignore_paths):
                logger.debug(f"Pruning ignored directory {path}")
                return Visit.SKIP
            return Visit.DESCEND

        if stat.S_ISREG(mode):
            if is_ignored(to_posix_relative(path, root), ignore_paths):
                return Visit.SKIP
            return Visit.INCLUDE

        # Devices, sockets, fifos
        return Visit.SKIP

    def _list_directory(self, directory: Path) -> list[Path]:
        try:
            with os.scandir(directory) as it:
                return [Path(entry.path) for entry in it]
        except OSError as e:
            raise TraversalError(
                f"failed to list directory {directory}: {e}", path=str(directory)
            ) from e

    def _directory_identity(self, directory: Path) -> str:
        try:
            return os.path.realpath(directory)
        except OSError as e:
            raise TraversalError(
                f"failed to resolve directory {directory}: {e}", path=str(directory)
            ) from e
