"""Concrete providers for modeldigest interfaces."""
