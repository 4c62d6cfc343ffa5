# tests/test_file_io.py

from pathlib import Path

import pytest

import acs.core.file_io as file_io
from acs.core.file_io import (
    backup_file,
    durable_write_json,
    read_json,
    remove_file_if_exists,
    restore_backup,
    write_json,
    write_text_with_backup,
)


def test_read_json_missing_or_corrupt_is_none(tmp_path: Path):
    assert read_json(tmp_path / "missing.json") is None

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    assert read_json(corrupt) is None


def test_read_json_default_distinguishes_null(tmp_path: Path):
    marker = object()
    null_file = tmp_path / "null.json"
    null_file.write_text("null", encoding="utf-8")

    assert read_json(null_file, default=marker) is None
    assert read_json(tmp_path / "missing.json", default=marker) is marker


def test_write_json_creates_parents_and_is_pretty(tmp_path: Path):
    path = tmp_path / "a" / "b" / "data.json"
    write_json(path, {"name": "项目", "items": [1, 2]})

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "项目" in text
    assert '\n  "items"' in text
    assert read_json(path) == {"name": "项目", "items": [1, 2]}


def test_backup_and_restore_are_noops_without_source(tmp_path: Path):
    assert backup_file(tmp_path / "missing", tmp_path / "missing.bak") is False
    assert restore_backup(tmp_path / "missing.bak", tmp_path / "missing") is False
    assert not (tmp_path / "missing.bak").exists()
    remove_file_if_exists(tmp_path / "missing")


def test_durable_write_removes_backup_on_success(tmp_path: Path):
    path = tmp_path / "config.json"
    backup = tmp_path / "config.json.bak"
    write_json(path, {"v": 1})

    durable_write_json(path, {"v": 2}, backup)

    assert read_json(path) == {"v": 2}
    assert not backup.exists()


def test_durable_write_restores_previous_content_on_failure(tmp_path: Path, monkeypatch):
    """A write that dies halfway leaves the old bytes in place."""
    path = tmp_path / "config.json"
    backup = tmp_path / "config.json.bak"
    write_json(path, {"v": 1})
    original = path.read_bytes()

    def partial_write(target, value):
        Path(target).write_text('{"v": ', encoding="utf-8")
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(file_io, "write_json", partial_write)

    with pytest.raises(OSError):
        durable_write_json(path, {"v": 2}, backup)

    assert path.read_bytes() == original


def test_durable_write_failure_without_previous_file_leaves_nothing(tmp_path: Path, monkeypatch):
    path = tmp_path / "config.json"

    def partial_write(target, value):
        Path(target).write_text("{", encoding="utf-8")
        raise OSError("disk full")

    monkeypatch.setattr(file_io, "write_json", partial_write)

    with pytest.raises(OSError):
        durable_write_json(path, {"v": 1}, tmp_path / "config.json.bak")

    assert not path.exists()


def test_write_text_with_backup_keeps_previous_content(tmp_path: Path):
    path = tmp_path / "rules" / "CLAUDE.md"
    backup = path.with_name("CLAUDE.md.bak")

    write_text_with_backup(path, "first", backup)
    assert not backup.exists()

    write_text_with_backup(path, "second", backup)
    assert path.read_text(encoding="utf-8") == "second"
    assert backup.read_text(encoding="utf-8") == "first"
