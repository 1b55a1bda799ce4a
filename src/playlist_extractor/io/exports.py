# src/playlist_extractor/io/exports.py
from __future__ import annotations

import csv
import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from ..constants import AUTHOR_KEYS, DESCRIPTION_KEY, FIELD_KEYS, NOT_FOUND, REQUIRED_KEYS
from ..errors import OutputWriteError
from ..types import ExtractOptions, Record


def format_block(record: Record, options: ExtractOptions) -> str:
    """
    Render one text-report block, terminated by a blank line.
    Author/description lines only appear when enabled and non-empty.
    """
    lines = [
        f"Playlist Name: {record.playlist_name or NOT_FOUND}",
        f"Share Code: {record.share_code or NOT_FOUND}",
    ]
    if options.authors and record.author_name and record.author_steam_id:
        lines.append(f"Author: {record.author_name} SID: {record.author_steam_id}")
    if options.description and record.description:
        lines.append(f"Description: {record.description}")
    return "\n".join(lines) + "\n\n"


def _columns(options: ExtractOptions) -> list[str]:
    cols = list(REQUIRED_KEYS)
    if options.authors:
        cols += AUTHOR_KEYS
    if options.description:
        cols.append(DESCRIPTION_KEY)
    return cols


def _as_row(record: Record, cols: list[str]) -> dict[str, str]:
    return {c: getattr(record, FIELD_KEYS[c]) for c in cols}


def _write_text(records: list[Record], fh: TextIO, options: ExtractOptions) -> None:
    for rec in records:
        fh.write(format_block(rec, options))


def _write_json(records: list[Record], fh: TextIO, options: ExtractOptions) -> None:
    cols = _columns(options)
    json.dump([_as_row(r, cols) for r in records], fh, ensure_ascii=False, indent=2)
    fh.write("\n")


def _write_csv(records: list[Record], fh: TextIO, options: ExtractOptions) -> None:
    cols = _columns(options)
    writer = csv.DictWriter(fh, fieldnames=cols)
    writer.writeheader()
    writer.writerows(_as_row(r, cols) for r in records)


_WRITERS: dict[str, Callable[[list[Record], TextIO, ExtractOptions], None]] = {
    "text": _write_text,
    "json": _write_json,
    "csv": _write_csv,
}


def write_report(
    records: Iterable[Record],
    out_path: Path,
    options: ExtractOptions | None = None,
    fmt: str = "text",
) -> Path:
    """Write `records` to `out_path` in `fmt`; raise OutputWriteError if it cannot be opened."""
    options = options or ExtractOptions()
    writer = _WRITERS[fmt]
    try:
        with out_path.open("w", encoding="utf-8", newline="" if fmt == "csv" else None) as fh:
            writer(list(records), fh, options)
    except OSError as e:
        raise OutputWriteError(f"Failed to open output file: {out_path}") from e
    return out_path


def resolve_output_path(folder: Path, output_dir: Path | None, name: str) -> Path:
    """`output_dir/name` when given, else `name` beside the scanned folder (its lexical parent)."""
    base = output_dir if output_dir is not None else folder.parent
    return base / name
