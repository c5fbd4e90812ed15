"""Digest command module - prints the root digest of a model directory."""

import argparse
import sys

from loguru import logger

from modeldigest.core.config.config import Config
from modeldigest.core.exceptions import SerializationError
from modeldigest.services.root_digest import compute_digest

from ..utils.rich_output import RichOutputFormatter


def digest_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the digest command.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=args.verbose)
    formatter.verbose_info(f"Serialization: {config.serialization!r}")

    try:
        digest = compute_digest(args.model_path, config.serialization)
    except SerializationError as e:
        formatter.error(f"Error computing digest: {e}")
        logger.opt(exception=e).debug("Full error details:")
        sys.exit(1)

    formatter.result(digest)
