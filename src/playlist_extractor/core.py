# src/playlist_extractor/core.py
from __future__ import annotations

import logging
from pathlib import Path

from .constants import FIELD_KEYS, NOT_FOUND
from .errors import UnreadableFile
from .io.files import read_text
from .io.scan import collect_json_files
from .parsing.fields import extract_fields, wanted_keys
from .types import ExtractOptions, Record, RunStats, ScanResult

log = logging.getLogger(__name__)


# ----------------------------
# Extraction
# ----------------------------


def _print_diagnostic(record: Record, options: ExtractOptions) -> None:
    print(f"File: {record.filename}")
    for key in wanted_keys(options):
        value = getattr(record, FIELD_KEYS[key])
        print(f"  {key}: {value or NOT_FOUND}")


def extract_file(path: Path, options: ExtractOptions | None = None) -> Record:
    """
    Extract a Record from one JSON file and print its per-file diagnostic.

    Unreadable or zero-length files give an all-empty Record without parsing.
    """
    options = options or ExtractOptions()
    try:
        content = read_text(path)
    except UnreadableFile as e:
        log.debug("%s", e)
        content = ""

    if not content:
        log.warning("Failed to open or empty file: %s", path)
        record = Record(filename=path.name)
    else:
        fields = extract_fields(content, options)
        record = Record(
            filename=path.name,
            **{FIELD_KEYS[k]: v for k, v in fields.items()},
        )

    _print_diagnostic(record, options)
    return record


# ----------------------------
# Aggregation
# ----------------------------


class Aggregator:
    """Tabulates records in arrival order and tracks duplicate share codes/names."""

    def __init__(self) -> None:
        self.stats = RunStats()
        self.records: list[Record] = []
        self._seen_codes: set[str] = set()
        self._seen_names: set[str] = set()

    def add(self, record: Record) -> None:
        self.stats.files_seen += 1
        if not record.ok:
            self.stats.failed_parses += 1
            return

        self.stats.successful_parses += 1
        if record.share_code in self._seen_codes:
            self.stats.duplicate_share_codes += 1
            log.warning("Duplicate share code %r in %s", record.share_code, record.filename)
        else:
            self._seen_codes.add(record.share_code)

        if record.playlist_name in self._seen_names:
            self.stats.duplicate_names += 1
            log.warning("Duplicate playlist name %r in %s", record.playlist_name, record.filename)
        else:
            self._seen_names.add(record.playlist_name)

        self.records.append(record)

    def result(self) -> ScanResult:
        return ScanResult(records=list(self.records), stats=self.stats)


def scan_folder(folder: Path, options: ExtractOptions | None = None) -> ScanResult:
    """Scan `folder` (non-recursive) and aggregate every `.json` file found."""
    options = options or ExtractOptions()
    agg = Aggregator()
    for path in collect_json_files(folder):
        agg.add(extract_file(path, options))
    return agg.result()
