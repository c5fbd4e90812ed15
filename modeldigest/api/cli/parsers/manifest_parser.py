"""Manifest command argument parser for modeldigest CLI."""

import argparse
from typing import Any, cast

from .common_arguments import (
    add_common_arguments,
    add_config_arguments,
    add_model_path_argument,
)


def add_manifest_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add manifest command subparser to the main parser."""
    manifest_parser = subparsers.add_parser(
        "manifest",
        help="List the files and hashes that make up the root digest",
        description=(
            "Prints every manifest entry in digest order followed by the "
            "root digest. Output is for inspection, not a stable file format."
        ),
    )

    add_model_path_argument(manifest_parser)

    manifest_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per line instead of a table",
    )

    add_config_arguments(manifest_parser, ["serialization"])
    add_common_arguments(manifest_parser)

    return cast(argparse.ArgumentParser, manifest_parser)


__all__: list[str] = ["add_manifest_subparser"]
