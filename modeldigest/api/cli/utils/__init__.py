"""Utility helpers for the modeldigest CLI."""

from .rich_output import RichOutputFormatter

__all__ = ["RichOutputFormatter"]
