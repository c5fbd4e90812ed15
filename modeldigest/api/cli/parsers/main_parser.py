"""Main argument parser for modeldigest CLI."""

import argparse

from modeldigest import __version__

from .digest_parser import add_digest_subparser
from .manifest_parser import add_manifest_subparser


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="modeldigest",
        description="Reproducible root digests for model directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modeldigest digest ./my-model
  modeldigest digest ./my-model --ignore-path cache --allow-symlinks
  modeldigest manifest ./my-model --json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"modeldigest {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Register all command subparsers."""
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    add_digest_subparser(subparsers)
    add_manifest_subparser(subparsers)
    return subparsers


__all__: list[str] = ["create_main_parser", "setup_subparsers"]
