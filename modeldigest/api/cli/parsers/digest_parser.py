"""Digest command argument parser for modeldigest CLI."""

import argparse
from typing import Any, cast

from .common_arguments import (
    add_common_arguments,
    add_config_arguments,
    add_model_path_argument,
)


def add_digest_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add digest command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured digest subparser
    """
    digest_parser = subparsers.add_parser(
        "digest",
        help="Compute the root digest of a model directory",
        description=(
            "Hashes every selected file with SHA-256 and prints the root "
            "digest as sha256:<hex>, compatible with model_signing."
        ),
    )

    add_model_path_argument(digest_parser)
    add_config_arguments(digest_parser, ["serialization"])
    add_common_arguments(digest_parser)

    return cast(argparse.ArgumentParser, digest_parser)


__all__: list[str] = ["add_digest_subparser"]
