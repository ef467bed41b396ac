"""Shared type aliases used across logkeeper."""

from pathlib import Path

# Path types
PathLike = str | Path
