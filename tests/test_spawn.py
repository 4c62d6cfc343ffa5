# tests/test_spawn.py

import os
import sys
from pathlib import Path

import pytest

from acs.core.exceptions import CommandNotFoundError, CommandParseError
from acs.core.spawn import parse_command, run_command


def test_parse_command_splits_arguments():
    assert parse_command("claude --model opus") == ("claude", ["--model", "opus"])


@pytest.mark.skipif(os.name == "nt", reason="posix quoting")
def test_parse_command_honours_quotes():
    assert parse_command('codex "fix the bug" -q') == ("codex", ["fix the bug", "-q"])


@pytest.mark.parametrize("line", ["", "   ", '"unterminated'])
def test_parse_command_rejects_empty_or_broken(line):
    with pytest.raises(CommandParseError):
        parse_command(line)


def test_run_command_returns_exit_code(tmp_path: Path):
    script = tmp_path / "exit.py"
    script.write_text("import sys, os; sys.exit(3 if os.getcwd() else 0)", encoding="utf-8")
    line = f'"{sys.executable}" "{script}"' if os.name != "nt" else f"{sys.executable} {script}"

    assert run_command(line, cwd=tmp_path) == 3


def test_run_command_missing_executable(tmp_path: Path):
    with pytest.raises(CommandNotFoundError):
        run_command("definitely-not-a-real-acs-binary", cwd=tmp_path)
