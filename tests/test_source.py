"""Tests for input resolution."""

import io

import pytest

from json_analyzer.source import SourceError, load_source, require_array


def test_literal_json() -> None:
    assert load_source('{"a": 1}') == {"a": 1}
    assert load_source("[1, 2]", is_file=False) == [1, 2]


def test_file_by_flag(tmp_path) -> None:
    path = tmp_path / "data.txt"
    path.write_text('{"ok": true}', encoding="utf-8")
    assert load_source(str(path), is_file=True) == {"ok": True}


def test_file_autodetected_by_existence(tmp_path) -> None:
    path = tmp_path / "payload"
    path.write_text("[1]", encoding="utf-8")
    assert load_source(str(path)) == [1]


def test_missing_json_file_is_reported(tmp_path) -> None:
    missing = tmp_path / "nope.json"
    with pytest.raises(SourceError, match="Could not read file"):
        load_source(str(missing))


def test_literal_mode_never_reads_files(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(SourceError, match="Invalid JSON"):
        load_source(str(path), is_file=False)


def test_invalid_json_preview_is_truncated() -> None:
    text = "{" + "x" * 200
    with pytest.raises(SourceError) as excinfo:
        load_source(text, is_file=False)
    message = str(excinfo.value)
    assert message.startswith("Invalid JSON: {" + "x" * 79 + "…")
    assert "line 1" in message


def test_stdin(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"from": "stdin"}'))
    assert load_source("-") == {"from": "stdin"}


def test_require_array() -> None:
    assert require_array([1]) == [1]
    with pytest.raises(SourceError, match="Input must be a JSON array of objects"):
        require_array({"a": 1})
