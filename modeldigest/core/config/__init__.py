"""Configuration models for modeldigest."""

from .config import Config
from .logging_config import FileLoggingConfig, LoggingConfig
from .serialization_config import SerializationConfig

__all__ = [
    "Config",
    "FileLoggingConfig",
    "LoggingConfig",
    "SerializationConfig",
]
