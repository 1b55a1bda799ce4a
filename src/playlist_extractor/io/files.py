# src/playlist_extractor/io/files.py
from __future__ import annotations

from pathlib import Path

from ..errors import UnreadableFile


def read_text(path: Path) -> str:
    """Read a file as UTF-8 (a leading BOM is dropped), replacing undecodable bytes."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise UnreadableFile(f"{path}: {e.strerror or e}") from e
    return data.decode("utf-8-sig", errors="replace")
