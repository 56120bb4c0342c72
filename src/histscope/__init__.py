"""Scoped shell-history labels, previews and headers for fuzzy pickers."""

__version__ = "0.1.0"
