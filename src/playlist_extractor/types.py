from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class ExtractOptions:
    """Which optional fields a run extracts and reports."""
    authors: bool = False
    description: bool = False


@dataclass(slots=True, frozen=True)
class Record:
    """Fields extracted from one JSON file. Empty string means not found."""
    filename: str = ""
    playlist_name: str = ""
    share_code: str = ""
    author_name: str = ""
    author_steam_id: str = ""
    description: str = ""

    @property
    def ok(self) -> bool:
        return bool(self.playlist_name and self.share_code)


@dataclass(slots=True)
class RunStats:
    files_seen: int = 0
    successful_parses: int = 0
    failed_parses: int = 0
    duplicate_share_codes: int = 0
    duplicate_names: int = 0


@dataclass(slots=True)
class ScanResult:
    records: list[Record] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)
