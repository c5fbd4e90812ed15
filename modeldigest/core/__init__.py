"""Core models, configuration and utilities for modeldigest."""
