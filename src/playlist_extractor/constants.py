# src/playlist_extractor/constants.py
from __future__ import annotations

import re
from typing import Final

# JSON key -> Record attribute, in report/diagnostic order
FIELD_KEYS: Final[dict[str, str]] = {
    "playlistName": "playlist_name",
    "shareCode": "share_code",
    "authorName": "author_name",
    "authorSteamId": "author_steam_id",
    "description": "description",
}

REQUIRED_KEYS: Final = ("playlistName", "shareCode")
AUTHOR_KEYS: Final = ("authorName", "authorSteamId")
DESCRIPTION_KEY: Final = "description"

NOT_FOUND: Final = "(not found)"

JSON_SUFFIX: Final = ".json"

DEFAULT_OUTPUT_NAMES: Final[dict[str, str]] = {
    "text": "results.txt",
    "json": "results.json",
    "csv": "results.csv",
}

# ---------------------------------------------------------------------------
# Fallback extraction
# Matches a quoted key, a colon and a quoted value, e.g.
#   "shareCode": "ABC-123"
# The value is captured raw: no escape decoding, the first '"' ends it.
# ---------------------------------------------------------------------------
FALLBACK_FIELD_RX: Final[dict[str, re.Pattern[str]]] = {
    key: re.compile(r'"' + re.escape(key) + r'"\s*:\s*"([^"]*)"') for key in FIELD_KEYS
}
