from __future__ import annotations

import logging
from pathlib import Path

import pytest
from playlist_extractor.core import Aggregator, extract_file, scan_folder
from playlist_extractor.types import ExtractOptions, Record


def _rec(name: str, code: str) -> Record:
    return Record(filename=f"{name or 'x'}.json", playlist_name=name, share_code=code)


def test_every_repeat_counts_as_duplicate(caplog: pytest.LogCaptureFixture):
    agg = Aggregator()
    for name in ("A", "B", "C"):
        agg.add(_rec(name, "SAME"))
    assert agg.stats.duplicate_share_codes == 2
    assert agg.stats.duplicate_names == 0
    assert [r.playlist_name for r in agg.records] == ["A", "B", "C"]
    assert sum("Duplicate share code" in m for m in caplog.messages) == 2


def test_duplicate_names_tracked_independently():
    agg = Aggregator()
    agg.add(_rec("Mix", "1"))
    agg.add(_rec("Mix", "2"))
    agg.add(_rec("Mix", "1"))
    assert agg.stats.duplicate_names == 2
    assert agg.stats.duplicate_share_codes == 1


def test_failed_records_do_not_touch_seen_sets():
    agg = Aggregator()
    agg.add(_rec("Foo", ""))
    agg.add(_rec("", "ABC"))
    agg.add(_rec("Foo", "ABC"))
    s = agg.stats
    assert (s.files_seen, s.successful_parses, s.failed_parses) == (3, 1, 2)
    assert s.duplicate_names == 0 and s.duplicate_share_codes == 0
    assert s.successful_parses + s.failed_parses == s.files_seen
    assert len(agg.records) == 1


def test_extract_file_prints_diagnostic(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "one.json"
    f.write_text('{"playlistName": "Foo", "shareCode": "ABC", "authorName": "Ann"}')
    rec = extract_file(f, ExtractOptions(authors=True))
    assert rec.ok and rec.author_name == "Ann" and rec.author_steam_id == ""
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "File: one.json",
        "  playlistName: Foo",
        "  shareCode: ABC",
        "  authorName: Ann",
        "  authorSteamId: (not found)",
    ]


def test_extract_file_empty_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
):
    f = tmp_path / "empty.json"
    f.write_text("")
    with caplog.at_level(logging.WARNING):
        rec = extract_file(f)
    assert rec == Record(filename="empty.json")
    assert not rec.ok
    assert "Failed to open or empty file" in caplog.text
    assert "  shareCode: (not found)" in capsys.readouterr().out


def test_scan_folder_scenario(tmp_path: Path):
    (tmp_path / "a.json").write_text('{"playlistName":"Foo","shareCode":"ABC"}')
    (tmp_path / "b.json").write_text('{"playlistName":"Bar","shareCode":"ABC"}')
    (tmp_path / "c.json").write_text("")
    result = scan_folder(tmp_path)
    s = result.stats
    assert (s.files_seen, s.successful_parses, s.failed_parses) == (3, 2, 1)
    assert (s.duplicate_share_codes, s.duplicate_names) == (1, 0)
    assert sorted((r.playlist_name, r.share_code) for r in result.records) == [
        ("Bar", "ABC"),
        ("Foo", "ABC"),
    ]


def test_extract_file_unreadable(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.WARNING):
        rec = extract_file(tmp_path / "gone.json")
    assert rec == Record(filename="gone.json")
    assert "Failed to open or empty file" in caplog.text
    assert "File: gone.json" in capsys.readouterr().out
