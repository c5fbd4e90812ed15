"""Manifest data model for modeldigest."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class FileEntry:
    """One regular file of a model tree.

    Attributes:
        name: Path relative to the tree root, forward-slash separated, with
            no leading slash or "./"
        digest: Read-only mapping from algorithm name to lowercase hex
            digest; entries hash by name only
    """

    name: str
    digest: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "digest", MappingProxyType(dict(self.digest)))


@dataclass(frozen=True)
class Manifest:
    """Serialized model: display name plus file entries sorted by name."""

    model_name: str
    files: tuple[FileEntry, ...] = ()

    @classmethod
    def from_entries(cls, model_name: str, entries: Iterable[FileEntry]) -> Manifest:
        """Build a manifest with entries sorted by relative path.

        Names are compared as filesystem bytes so undecodable names
        (surrogate-escaped) order exactly as their raw bytes do.
        """
        return cls(
            model_name=model_name,
            files=tuple(sorted(entries, key=lambda entry: os.fsencode(entry.name))),
        )

    def names(self) -> list[str]:
        return [entry.name for entry in self.files]

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)
