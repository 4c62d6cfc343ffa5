# tests/test_rules.py

from pathlib import Path

import pytest

from acs.core.exceptions import ProjectPathError, UnsupportedCliError
from acs.core.rules import (
    extract_cli_key,
    get_global_rule_dir,
    get_rule_file_name,
    write_global_rule_file,
    write_project_rule_file,
)


@pytest.mark.parametrize("command, key", [
    ("claude", "claude"),
    ("codex --model o3", "codex"),
    ("/usr/local/bin/gemini", "gemini"),
    ("C:\\tools\\Codex.EXE --full-auto", "codex"),
    ("claude.cmd", "claude"),
    ("   ", None),
])
def test_extract_cli_key(command, key):
    assert extract_cli_key(command) == key


def test_rule_file_names():
    assert get_rule_file_name("claude") == "CLAUDE.md"
    assert get_rule_file_name("codex") == "AGENTS.md"
    assert get_rule_file_name("gemini -y") == "GEMINI.md"
    assert get_rule_file_name("aider") is None


def test_global_rule_dir(tmp_path: Path):
    assert get_global_rule_dir("codex", home=tmp_path) == tmp_path / ".codex"
    assert get_global_rule_dir("aider", home=tmp_path) is None


def test_write_global_rule_file_keeps_backup(tmp_path: Path):
    first = write_global_rule_file("claude", "# v1", home=tmp_path)
    assert first == tmp_path / ".claude" / "CLAUDE.md"
    assert first.read_text(encoding="utf-8") == "# v1"

    write_global_rule_file("claude", "# v2", home=tmp_path)
    assert first.read_text(encoding="utf-8") == "# v2"
    assert (tmp_path / ".claude" / "CLAUDE.md.bak").read_text(encoding="utf-8") == "# v1"


def test_write_project_rule_file(tmp_path: Path):
    project = tmp_path / "repo"
    project.mkdir()

    written = write_project_rule_file(str(project), "gemini", "rules")
    assert written.name == "GEMINI.md"
    assert written.read_text(encoding="utf-8") == "rules"

    with pytest.raises(ProjectPathError):
        write_project_rule_file(str(tmp_path / "missing"), "gemini", "rules")


def test_unsupported_cli_is_rejected(tmp_path: Path):
    with pytest.raises(UnsupportedCliError):
        write_global_rule_file("aider", "x", home=tmp_path)
