"""Flock project initializer."""

__version__ = "0.1.0"
