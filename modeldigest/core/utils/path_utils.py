"""Path utility functions for modeldigest.

All paths handed between components are forward-slash separated and relative
to the resolved tree root. Host-native separators only appear at the
filesystem-call boundary.
"""

import os
from collections.abc import Iterable
from pathlib import Path, PurePath


def to_posix_relative(path: str | Path, root: str | Path) -> str:
    """Return ``path`` relative to ``root`` with forward slashes.

    The computation is lexical: neither path is resolved here, so callers
    must pass paths that already share the canonical root.

    Args:
        path: Absolute path inside the tree
        root: Absolute, resolved tree root

    Returns:
        Relative path such as ``subdir/model.bin``, or ``.`` for the root
    """
    return PurePath(os.path.relpath(path, root)).as_posix()


def normalize_ignore_path(ignore_path: str | Path, root: Path) -> str | None:
    """Normalize an ignore specifier to a root-relative POSIX path.

    Relative specifiers are taken as already relative to the tree root.
    Absolute specifiers are re-expressed relative to ``root`` lexically, so
    a specifier naming a symlink covers the link and not its target. Only
    when that escapes the tree is the specifier's parent resolved, which
    lines up /var -> /private/var style aliases of the resolved root.

    Args:
        ignore_path: Absolute path or path relative to the tree root
        root: Absolute, resolved tree root

    Returns:
        Normalized relative path, or None when the specifier can never match
        (empty, or located outside the tree)
    """
    if not str(ignore_path):
        return None

    path_obj = Path(ignore_path)
    if not path_obj.is_absolute():
        return path_obj.as_posix()

    lexical = os.path.abspath(path_obj)
    relative = _relative_inside(lexical, root)
    if relative is None:
        parent, name = os.path.split(lexical)
        relative = _relative_inside(os.path.join(os.path.realpath(parent), name), root)
    return relative


def _relative_inside(path: str, root: Path) -> str | None:
    """POSIX form of ``path`` relative to ``root``, or None if outside it."""
    try:
        relative = os.path.relpath(path, root)
    except ValueError:
        # Different drive on Windows
        return None

    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return None
    return PurePath(relative).as_posix()


def normalize_ignore_paths(
    ignore_paths: Iterable[str | Path], root: Path
) -> list[str]:
    """Normalize every specifier, dropping the ones that can never match."""
    normalized = []
    for ignore_path in ignore_paths:
        relative = normalize_ignore_path(ignore_path, root)
        if relative is not None:
            normalized.append(relative)
    return normalized


def matches_ignore_path(relative_path: str, ignore_path: str) -> bool:
    """Check whether a relative path is covered by a normalized specifier.

    A specifier covers the exact path and, when it names a directory,
    everything beneath it. ``model`` covers ``model`` and ``model/x.bin``
    but not ``model.bin``.
    """
    return relative_path == ignore_path or relative_path.startswith(ignore_path + "/")


def is_ignored(relative_path: str, ignore_paths: Iterable[str]) -> bool:
    """Check a relative path against a list of normalized specifiers."""
    return any(matches_ignore_path(relative_path, spec) for spec in ignore_paths)
