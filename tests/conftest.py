# tests/conftest.py

import json
from pathlib import Path

import pytest

from acs.core.config_store import ConfigStore

# --------------------------------------------------------------------------- #
# Fixtures
# --------------------------------------------------------------------------- #
@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Isolated home directory, also exported as ACS_HOME for the CLI."""
    d = tmp_path / "home"
    d.mkdir()
    monkeypatch.setenv("ACS_HOME", str(d))
    return d


@pytest.fixture
def store(home: Path) -> ConfigStore:
    return ConfigStore(home=home)


@pytest.fixture
def write_config(home: Path):
    """Write a raw configuration document to <home>/.acs/config.json."""
    def _write(document) -> Path:
        path = home / ".acs" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def claude_document():
    """A configuration with two Claude profiles, 'work' active."""
    return {
        "language": "en",
        "projects": [],
        "cli": [{"name": "Claude Code", "command": "claude", "order": 1}],
        "config": {
            "claude": {
                "current": "work",
                "configs": {
                    "work": {
                        "env": {
                            "ANTHROPIC_BASE_URL": "https://work.example.com",
                            "ANTHROPIC_AUTH_TOKEN": "sk-abc123456789",
                        },
                        "model": "opus",
                    },
                    "personal": {
                        "env": {"ANTHROPIC_AUTH_TOKEN": "sk-personal-0000"},
                        "note": "kept as-is",
                    },
                },
            }
        },
    }
