"""Rich-based output formatting utilities for modeldigest CLI commands.

Status messages go to stderr; command results (digests, manifests) go to
stdout so they can be piped.
"""

import json
import os
import sys
from typing import Any

import rich.box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modeldigest.core.models import Manifest


# Constants for fallback message prefixes
class MessagePrefixes:
    """Constants for consistent message prefixes in fallback mode."""

    INFO = "[INFO]"
    SUCCESS = "[SUCCESS]"
    WARN = "[WARN]"
    ERROR = "[ERROR]"
    DEBUG = "[DEBUG]"


class RichOutputFormatter:
    """Terminal output formatter using Rich library."""

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self._terminal_compatible = self._check_terminal_compatibility()
        self.console = Console(stderr=True) if self._terminal_compatible else None
        self.stdout_console = Console(soft_wrap=True) if sys.stdout.isatty() else None

    def _check_terminal_compatibility(self) -> bool:
        """Check if stderr supports Rich formatting."""
        if os.environ.get("MODELDIGEST_NO_RICH"):
            return False

        if not sys.stderr.isatty():
            return False

        # Skip Rich for very basic terminals
        return os.environ.get("TERM", "") not in ["dumb", "unknown"]

    def _safe_print(self, message: str, fallback_message: str) -> None:
        """Print with Rich to stderr, or plain text when Rich is unavailable."""
        if self.console is not None:
            self.console.print(message)
        else:
            print(fallback_message, file=sys.stderr)

    def info(self, message: str) -> None:
        """Print an info message."""
        self._safe_print(
            f"[blue][INFO][/blue] {escape(message)}", f"{MessagePrefixes.INFO} {message}"
        )

    def success(self, message: str) -> None:
        """Print a success message."""
        self._safe_print(
            f"[green][SUCCESS][/green] {escape(message)}",
            f"{MessagePrefixes.SUCCESS} {message}",
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._safe_print(
            f"[yellow][WARN][/yellow] {escape(message)}",
            f"{MessagePrefixes.WARN} {message}",
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._safe_print(
            f"[red][ERROR][/red] {escape(message)}",
            f"{MessagePrefixes.ERROR} {message}",
        )

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self._safe_print(
                f"[cyan][DEBUG][/cyan] {escape(message)}",
                f"{MessagePrefixes.DEBUG} {message}",
            )

    def result(self, text: str) -> None:
        """Print a command result line to stdout, unstyled."""
        print(text)

    def manifest_table(self, manifest: Manifest, digest: str) -> None:
        """Print manifest entries and root digest as a table on stdout."""
        if self.stdout_console is None:
            for entry in manifest.files:
                print(f"{entry.digest.get('sha256', '')}  {entry.name}")
            print(digest)
            return

        table = Table(
            title=f"{manifest.model_name} ({len(manifest)} files)",
            box=rich.box.ROUNDED,
            caption=digest,
        )
        table.add_column("Path", style="cyan")
        table.add_column("SHA-256", style="white", no_wrap=True)
        for entry in manifest.files:
            table.add_row(escape(entry.name), entry.digest.get("sha256", ""))
        self.stdout_console.print(table)

    def manifest_json_lines(self, manifest: Manifest, digest: str) -> None:
        """Print one JSON object per manifest entry, then the root digest."""
        for entry in manifest.files:
            print(json.dumps({"name": entry.name, "digest": dict(entry.digest)}))
        summary: dict[str, Any] = {
            "model_name": manifest.model_name,
            "files": len(manifest),
            "digest": digest,
        }
        print(json.dumps(summary))
