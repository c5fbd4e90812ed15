"""Argument parser utilities for modeldigest CLI commands."""

from .digest_parser import add_digest_subparser
from .main_parser import create_main_parser, setup_subparsers
from .manifest_parser import add_manifest_subparser

__all__ = [
    "add_digest_subparser",
    "add_manifest_subparser",
    "create_main_parser",
    "setup_subparsers",
]
