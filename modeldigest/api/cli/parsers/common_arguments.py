"""Common CLI argument patterns shared across parsers."""

import argparse
from pathlib import Path


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments common to all commands.

    Args:
        parser: Argument parser to add common arguments to
    """
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Enable file logging to specified path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set file logging level (default: INFO)",
    )


def add_model_path_argument(parser: argparse.ArgumentParser) -> None:
    """Add the positional model directory argument."""
    parser.add_argument(
        "model_path",
        metavar="MODEL_PATH",
        type=Path,
        help="Model directory to digest",
    )


def add_config_arguments(parser: argparse.ArgumentParser, configs: list[str]) -> None:
    """Add CLI arguments for specified config sections.

    Args:
        parser: Argument parser to add config arguments to
        configs: List of config section names to include
    """
    if "serialization" in configs:
        from modeldigest.core.config.serialization_config import SerializationConfig

        SerializationConfig.add_cli_arguments(parser)
