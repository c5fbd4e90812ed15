"""Main entry point for modeldigest CLI."""

import sys
from typing import Any

from loguru import logger
from pydantic import ValidationError

from modeldigest.core.config.config import Config
from modeldigest.core.config.logging_config import LoggingConfig

from .parsers import create_main_parser, setup_subparsers
from .utils.rich_output import RichOutputFormatter


def setup_logging(verbose: bool = False, config: Any = None) -> None:
    """Configure loguru sinks for the CLI.

    Args:
        verbose: Log everything down to DEBUG on the console
        config: LoggingConfig, or any object with a ``logging`` attribute
            holding one
    """
    logging_config = getattr(config, "logging", config)
    if not isinstance(logging_config, LoggingConfig):
        logging_config = LoggingConfig()

    logger.remove()

    console_level = "DEBUG" if verbose else logging_config.console_level
    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{level: <8}</level> | {message}",
    )

    if logging_config.file.enabled:
        file_config = logging_config.file
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and dispatch to a command."""
    parser = create_main_parser()
    setup_subparsers(parser)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = Config.from_args(args)
    except ValidationError as e:
        RichOutputFormatter().error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(verbose=args.verbose, config=config)

    if args.command == "digest":
        from .commands.digest import digest_command

        digest_command(args, config)
    elif args.command == "manifest":
        from .commands.manifest import manifest_command

        manifest_command(args, config)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
