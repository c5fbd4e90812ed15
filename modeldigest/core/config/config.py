"""Top-level configuration for modeldigest.

Configuration Sources (in order of precedence):
1. CLI arguments
2. Environment variables (MODELDIGEST_*, nested with "__")
3. Default values

Environment Variables:
    MODELDIGEST_SERIALIZATION__ALLOW_SYMLINKS=true
    MODELDIGEST_SERIALIZATION__IGNORE_GIT_PATHS=false
    MODELDIGEST_SERIALIZATION__IGNORE_PATHS='["cache", "/abs/path"]'
    MODELDIGEST_LOGGING__CONSOLE_LEVEL=INFO
"""

import argparse
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LoggingConfig
from .serialization_config import SerializationConfig


class Config(BaseSettings):
    """Application configuration assembled from environment and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="MODELDIGEST_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    serialization: SerializationConfig = Field(default_factory=SerializationConfig.default)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_args(cls, args: argparse.Namespace | None = None) -> "Config":
        """Build configuration, letting CLI arguments override the environment."""
        overrides: dict[str, Any] = {}
        if args is not None:
            if serialization := SerializationConfig.extract_cli_overrides(args):
                overrides["serialization"] = serialization
            if logging_overrides := LoggingConfig.extract_cli_overrides(args):
                overrides["logging"] = logging_overrides
        return cls(**overrides)
