"""Freewrite: a minimal personal writing app backed by plain files."""

__version__ = "0.1.0"
