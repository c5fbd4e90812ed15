"""Command-line interface for modeldigest."""
