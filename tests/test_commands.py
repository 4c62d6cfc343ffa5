# tests/test_commands.py

"""End-to-end tests of the acs commands through Typer's CliRunner."""

import json
import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from acs.cli import app
from acs.core.config_store import ConfigStore

runner = CliRunner()

# --------------------------------------------------------------------------- #
# Fixtures
# --------------------------------------------------------------------------- #
@pytest.fixture
def english(write_config):
    """An English configuration with no projects and two CLI tools."""
    document = {
        "language": "en",
        "projects": [],
        "cli": [
            {"name": "Gemini Cli", "command": "gemini", "order": 3},
            {"name": "CodeX", "command": "codex", "order": 1},
        ],
        "config": {},
    }
    write_config(document)
    return document


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    d = tmp_path / "repo"
    d.mkdir()
    return d


def _load(home: Path):
    return ConfigStore(home=home).load()

# --------------------------------------------------------------------------- #
# Projects
# --------------------------------------------------------------------------- #
def test_list_bootstraps_and_reports_empty(home: Path):
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "暂无项目" in result.stdout
    assert (home / ".acs" / "config.json").exists()


def test_add_with_path_then_list(home: Path, english, repo: Path):
    result = runner.invoke(app, ["add", str(repo)])
    assert result.exit_code == 0, result.stdout
    assert "Added: repo" in result.stdout

    result = runner.invoke(app, ["ls"])
    assert result.exit_code == 0
    assert "1 project(s):" in result.stdout
    assert "1. repo -> " in result.stdout

    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"name": "repo", "path": os.path.abspath(str(repo))}]


def test_add_prompts_for_path_until_valid(home: Path, english, repo: Path, tmp_path: Path):
    result = runner.invoke(app, ["add"], input=f"{tmp_path / 'missing'}\n{repo}\n")

    assert result.exit_code == 0, result.stdout
    assert "Path does not exist" in result.stdout
    assert [p.name for p in _load(home).projects] == ["repo"]


def test_add_missing_path_argument_fails(home: Path, english, tmp_path: Path):
    result = runner.invoke(app, ["add", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Path does not exist" in result.stdout


def test_add_duplicate_asks_for_confirmation(home: Path, english, repo: Path):
    runner.invoke(app, ["add", str(repo)])

    result = runner.invoke(app, ["add", str(repo)], input="n\n")
    assert result.exit_code == 0
    assert "Add cancelled" in result.stdout
    assert len(_load(home).projects) == 1

    result = runner.invoke(app, ["add", str(repo)], input="y\n")
    assert result.exit_code == 0
    assert len(_load(home).projects) == 2


def test_edit_project(home: Path, english, repo: Path, tmp_path: Path):
    other = tmp_path / "other"
    other.mkdir()
    runner.invoke(app, ["add", str(repo)])

    result = runner.invoke(app, ["edit"], input=f"1\n{other}\nrenamed\n")

    assert result.exit_code == 0, result.stdout
    assert "Updated: renamed" in result.stdout
    projects = _load(home).projects
    assert [(p.name, p.path) for p in projects] == [("renamed", os.path.abspath(str(other)))]


def test_remove_projects(home: Path, english, repo: Path, tmp_path: Path):
    other = tmp_path / "other"
    other.mkdir()
    runner.invoke(app, ["add", str(repo)])
    runner.invoke(app, ["add", str(other)])

    result = runner.invoke(app, ["rm"], input="1\ny\n")

    assert result.exit_code == 0, result.stdout
    assert "Removed 1 project(s): repo" in result.stdout
    assert [p.name for p in _load(home).projects] == ["other"]


def test_remove_with_empty_selection_is_cancelled(home: Path, english, repo: Path):
    runner.invoke(app, ["add", str(repo)])

    result = runner.invoke(app, ["remove"], input="\n")

    assert result.exit_code == 0
    assert "Nothing selected" in result.stdout
    assert len(_load(home).projects) == 1


def test_code_runs_tool_in_project(home: Path, write_config, repo: Path):
    command = f'"{sys.executable}" -c "import sys; sys.exit(5)"'
    write_config({
        "language": "en",
        "projects": [{"name": "repo", "path": str(repo)}],
        "cli": [{"name": "Exit", "command": command}],
    })

    result = runner.invoke(app, ["code"], input="1\n1\n")

    assert result.exit_code == 5, result.stdout
    assert "Running Exit in repo" in result.stdout


def test_code_without_projects(home: Path, english):
    result = runner.invoke(app, ["code"])

    assert result.exit_code == 1
    assert "No projects yet" in result.stdout

# --------------------------------------------------------------------------- #
# CLI tools
# --------------------------------------------------------------------------- #
def test_cli_list_is_sorted(home: Path, english):
    result = runner.invoke(app, ["cli", "list"])

    assert result.exit_code == 0
    assert result.stdout.index("CodeX") < result.stdout.index("Gemini Cli")
    assert "2 CLI tool(s):" in result.stdout


def test_cli_add_edit_remove(home: Path, english):
    result = runner.invoke(app, ["cli", "add"], input="Aider\naider --yes\n5\n")
    assert result.exit_code == 0, result.stdout
    assert _load(home).cli[-1].model_dump(mode="json") == {"name": "Aider", "command": "aider --yes", "order": 5}

    result = runner.invoke(app, ["cli", "edit"], input="3\nAider\naider\n-1\n7\n")
    assert result.exit_code == 0, result.stdout
    assert "Order must be a non-negative integer" in result.stdout
    assert _load(home).cli[-1].model_dump(mode="json") == {"name": "Aider", "command": "aider", "order": 7}

    result = runner.invoke(app, ["cli", "rm"], input="3\ny\n")
    assert result.exit_code == 0, result.stdout
    assert [tool.name for tool in _load(home).cli] == ["Gemini Cli", "CodeX"]


def test_cli_add_duplicate_command_declined(home: Path, english):
    result = runner.invoke(app, ["cli", "add"], input="Another\ncodex\n0\nn\n")

    assert result.exit_code == 0
    assert len(_load(home).cli) == 2

# --------------------------------------------------------------------------- #
# Claude profiles
# --------------------------------------------------------------------------- #
def test_config_claude_list(home: Path, write_config, claude_document):
    write_config(claude_document)

    result = runner.invoke(app, ["config", "claude", "list"])

    assert result.exit_code == 0
    assert "2 Claude profile(s):" in result.stdout
    assert "★ work" in result.stdout
    assert "sk-a*******6789" in result.stdout
    assert "sk-abc123456789" not in result.stdout


def test_config_claude_current(home: Path, write_config, claude_document):
    write_config(claude_document)

    result = runner.invoke(app, ["config", "claude", "current"])

    assert result.exit_code == 0
    assert "Current Claude profile: work" in result.stdout
    assert "model: opus" in result.stdout


def test_config_claude_current_dangling(home: Path, write_config, claude_document):
    claude_document["config"]["claude"]["current"] = "gone"
    write_config(claude_document)

    result = runner.invoke(app, ["config", "claude", "current"])

    assert result.exit_code == 0
    assert "gone does not exist" in result.stdout


def test_config_claude_use(home: Path, write_config, claude_document):
    write_config(claude_document)

    result = runner.invoke(app, ["config", "claude", "use", "personal", "--verbose"])

    assert result.exit_code == 0, result.stdout
    assert "Switched Claude profile to personal" in result.stdout
    settings = json.loads((home / ".claude" / "settings.json").read_text(encoding="utf-8"))
    assert settings["env"] == {"ANTHROPIC_AUTH_TOKEN": "sk-personal-0000"}
    assert _load(home).config.claude.current == "personal"


def test_config_claude_use_unknown(home: Path, write_config, claude_document):
    write_config(claude_document)

    result = runner.invoke(app, ["config", "claude", "use", "nope"])

    assert result.exit_code == 1
    assert "Profile not found: nope" in result.stdout


def test_config_claude_not_configured(home: Path, english):
    result = runner.invoke(app, ["config", "claude", "list"])

    assert result.exit_code == 1
    assert "Claude is not configured yet" in result.stdout

# --------------------------------------------------------------------------- #
# Language, rules, errors
# --------------------------------------------------------------------------- #
def test_lang_switch(home: Path):
    result = runner.invoke(app, ["lang", "en"])
    assert result.exit_code == 0
    assert "Language switched to English" in result.stdout
    assert _load(home).language.value == "en"

    result = runner.invoke(app, ["lang", "en"])
    assert result.exit_code == 0
    assert "Already using English" in result.stdout


def test_lang_prompt(home: Path, english):
    result = runner.invoke(app, ["lang"], input="3\n")

    assert result.exit_code == 0, result.stdout
    assert _load(home).language.value == "ja"


def test_lang_invalid(home: Path, english):
    result = runner.invoke(app, ["lang", "fr"])

    assert result.exit_code == 1
    assert "Unsupported language: fr" in result.stdout
    assert _load(home).language.value == "en"


def test_rules_global_and_project(home: Path, english, repo: Path, tmp_path: Path):
    source = tmp_path / "rules.md"
    source.write_text("# Be nice", encoding="utf-8")

    result = runner.invoke(app, ["rules", "global", "codex", "--file", str(source)])
    assert result.exit_code == 0, result.stdout
    assert (home / ".codex" / "AGENTS.md").read_text(encoding="utf-8") == "# Be nice"

    result = runner.invoke(app, ["rules", "project", "claude", str(repo), "--file", str(source)])
    assert result.exit_code == 0, result.stdout
    assert (repo / "CLAUDE.md").read_text(encoding="utf-8") == "# Be nice"


def test_rules_errors(home: Path, english, tmp_path: Path):
    source = tmp_path / "rules.md"
    source.write_text("x", encoding="utf-8")

    result = runner.invoke(app, ["rules", "global", "aider", "--file", str(source)])
    assert result.exit_code == 1
    assert "Unsupported CLI tool: aider" in result.stdout

    result = runner.invoke(app, ["rules", "global", "claude", "--file", str(tmp_path / "none.md")])
    assert result.exit_code == 1
    assert "Rule source file not found" in result.stdout


def test_invalid_configuration_lists_every_issue(home: Path, write_config):
    write_config({"language": "en", "projects": [{"name": "", "path": "/x"}], "cli": [{"name": "a"}]})

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "invalid format" in result.stdout
    assert "projects.0.name" in result.stdout
    assert "cli.0.command" in result.stdout


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "acs" in result.stdout
