"""Command implementations for modeldigest CLI."""

from .digest import digest_command
from .manifest import manifest_command

__all__ = ["digest_command", "manifest_command"]
