"""Shared type aliases used across freewrite."""

from pathlib import Path

# Path types
PathLike = str | Path
