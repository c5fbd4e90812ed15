"""Serialization configuration for modeldigest.

Controls which files of a model tree contribute to the manifest and how
symbolic links are treated.
"""

import argparse
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SerializationConfig(BaseModel):
    """Immutable path-selection policy for one serialization call.

    Configuration can be provided via:
    - Environment variables (MODELDIGEST_SERIALIZATION__*)
    - CLI arguments
    - Default values
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_paths: tuple[str, ...] = Field(
        default=(),
        description="Paths to skip, absolute or relative to the model root. "
        "Ignoring a directory ignores everything beneath it.",
    )

    ignore_git_paths: bool = Field(
        default=True,
        description="Ignore .git, .gitignore, .gitattributes and .github",
    )

    allow_symlinks: bool = Field(
        default=False,
        description="Follow symbolic links instead of failing on them",
    )

    @field_validator("ignore_paths", mode="before")
    @classmethod
    def validate_ignore_paths(cls, v: Any) -> Any:
        """Accept a single path or any iterable of str/Path values."""
        if v is None:
            return ()
        if isinstance(v, (str, Path)):
            v = [v]
        return tuple(str(p) for p in v)

    @classmethod
    def default(cls) -> "SerializationConfig":
        """Return a fresh default configuration.

        Defaults: no explicit ignore paths, git paths ignored, symlinks
        disallowed.
        """
        return cls()

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add serialization-related CLI arguments."""
        parser.add_argument(
            "--ignore-path",
            "--ignore-paths",
            dest="ignore_paths",
            action="append",
            metavar="PATH",
            help="Path to ignore, absolute or relative to the model root "
            "(can be given multiple times)",
        )

        parser.add_argument(
            "--ignore-git-paths",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Ignore git-related files (default: enabled)",
        )

        parser.add_argument(
            "--allow-symlinks",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Follow symbolic links instead of failing (default: disabled)",
        )

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract serialization config from CLI arguments."""
        overrides: dict[str, Any] = {}
        if getattr(args, "ignore_paths", None):
            overrides["ignore_paths"] = tuple(args.ignore_paths)
        if getattr(args, "ignore_git_paths", None) is not None:
            overrides["ignore_git_paths"] = args.ignore_git_paths
        if getattr(args, "allow_symlinks", None) is not None:
            overrides["allow_symlinks"] = args.allow_symlinks
        return overrides

    def __repr__(self) -> str:
        """String representation of serialization configuration."""
        return (
            f"SerializationConfig("
            f"ignore_paths={list(self.ignore_paths)!r}, "
            f"ignore_git_paths={self.ignore_git_paths}, "
            f"allow_symlinks={self.allow_symlinks})"
        )
