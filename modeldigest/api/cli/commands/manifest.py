"""Manifest command module - shows the entries behind a root digest."""

import argparse
import sys

from loguru import logger

from modeldigest.core.config.config import Config
from modeldigest.core.exceptions import SerializationError
from modeldigest.services.manifest_builder import serialize
from modeldigest.services.root_digest import compute_root_digest, format_digest

from ..utils.rich_output import RichOutputFormatter


def manifest_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the manifest command.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=args.verbose)

    try:
        manifest = serialize(args.model_path, config.serialization)
        digest = format_digest(compute_root_digest(manifest))
    except SerializationError as e:
        formatter.error(f"Error building manifest: {e}")
        logger.opt(exception=e).debug("Full error details:")
        sys.exit(1)

    if getattr(args, "json", False):
        formatter.manifest_json_lines(manifest, digest)
    else:
        formatter.manifest_table(manifest, digest)
