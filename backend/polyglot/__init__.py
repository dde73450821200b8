"""Polyglot translation backend for Ghanaian languages."""

__version__ = "1.0.0"
