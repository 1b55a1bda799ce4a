# src/playlist_extractor/parsing/fields.py
from __future__ import annotations

import json
import logging
from typing import Any

from ..constants import AUTHOR_KEYS, DESCRIPTION_KEY, FALLBACK_FIELD_RX, REQUIRED_KEYS
from ..errors import MalformedJson
from ..types import ExtractOptions

log = logging.getLogger(__name__)


def wanted_keys(options: ExtractOptions) -> tuple[str, ...]:
    """JSON keys this run extracts; every one of them must be filled to skip the fallback."""
    keys: tuple[str, ...] = REQUIRED_KEYS
    if options.authors:
        keys += AUTHOR_KEYS
    if options.description:
        keys += (DESCRIPTION_KEY,)
    return keys


def load_json(content: str) -> Any:
    """json.loads wrapper raising MalformedJson instead of the decoder's errors."""
    try:
        return json.loads(content)
    except (ValueError, RecursionError) as e:
        raise MalformedJson(str(e)) from e


def parse_structured(content: str, keys: tuple[str, ...]) -> dict[str, str]:
    """
    Structured strategy: parse the whole document and read the top-level `keys`.

    Missing keys and non-string values are simply absent from the result;
    malformed JSON or a non-object document yields an empty dict.
    """
    try:
        doc = load_json(content)
    except MalformedJson as e:
        log.debug("Structured parse failed: %s", e)
        return {}
    if not isinstance(doc, dict):
        log.debug("Top-level JSON value is %s, not an object", type(doc).__name__)
        return {}
    return {k: v for k in keys if isinstance(v := doc.get(k), str) and v}


def extract_fallback(content: str, key: str) -> str:
    """Pattern strategy: raw text between the quotes of the first `"key": "..."` match."""
    m = FALLBACK_FIELD_RX[key].search(content)
    return m.group(1) if m else ""


def extract_fields(content: str, options: ExtractOptions) -> dict[str, str]:
    """
    Return the wanted fields (JSON key -> value, "" when not found).

    The structured parse runs first; the pattern fallback is only consulted
    for keys it left empty.
    """
    keys = wanted_keys(options)
    found = parse_structured(content, keys)
    missing = [k for k in keys if not found.get(k)]
    if missing:
        log.debug("Falling back to pattern search for: %s", ", ".join(missing))
        for key in missing:
            found[key] = extract_fallback(content, key)
    return {k: found.get(k, "") for k in keys}
