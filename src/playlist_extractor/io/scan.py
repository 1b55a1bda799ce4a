# src/playlist_extractor/io/scan.py
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..constants import JSON_SUFFIX
from ..errors import NotADirectory, PathNotFound


def ensure_directory(path: Path) -> Path:
    """Raise PathNotFound / NotADirectory unless `path` is an existing directory."""
    if not path.exists():
        raise PathNotFound(f"Path does not exist: {path}")
    if not path.is_dir():
        raise NotADirectory(f"Path is not a directory: {path}")
    return path


def collect_json_files(folder: Path) -> Iterator[Path]:
    """
    Validate `folder` eagerly, then lazily yield its immediate `.json` children.

    Only regular files qualify (symlinks are followed); the suffix match is
    case-sensitive. Listing order is kept as the OS returns it and
    subdirectories are never entered.
    """
    ensure_directory(folder)
    return (p for p in folder.iterdir() if p.suffix == JSON_SUFFIX and p.is_file())
