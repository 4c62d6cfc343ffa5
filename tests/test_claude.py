# tests/test_claude.py

import json
from pathlib import Path

import pytest

from acs.core.claude import (
    ProfileApplier,
    add_profile,
    get_current_profile,
    mask_token,
    remove_profile,
    switch_profile,
    update_profile,
)
from acs.core.config_store import ConfigStore
from acs.core.exceptions import ClaudeNotConfiguredError, ProfileExistsError, ProfileNotFoundError
from acs.core.models import ClaudeProfile, validate_config

# --------------------------------------------------------------------------- #
# Fixtures
# --------------------------------------------------------------------------- #
@pytest.fixture
def applier(home: Path) -> ProfileApplier:
    return ProfileApplier(home=home)


@pytest.fixture
def settings_file(home: Path) -> Path:
    return home / ".claude" / "settings.json"

# --------------------------------------------------------------------------- #
# ProfileApplier
# --------------------------------------------------------------------------- #
def test_apply_keeps_unrelated_keys(applier: ProfileApplier, settings_file: Path):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(json.dumps({
        "permissions": {"allow": ["Bash(ls)"]},
        "env": {"OLD_KEY": "old", "ANTHROPIC_BASE_URL": "https://old"},
        "model": "sonnet",
    }), encoding="utf-8")

    profile = ClaudeProfile(env={"ANTHROPIC_BASE_URL": "https://new", "ANTHROPIC_AUTH_TOKEN": "t"}, model="opus")
    written = applier.apply(profile)

    assert written == settings_file
    settings = json.loads(settings_file.read_text(encoding="utf-8"))
    assert settings["permissions"] == {"allow": ["Bash(ls)"]}
    # env is replaced as a whole, not merged key by key
    assert settings["env"] == {"ANTHROPIC_BASE_URL": "https://new", "ANTHROPIC_AUTH_TOKEN": "t"}
    assert settings["model"] == "opus"
    assert not applier.backup_file.exists()


def test_apply_without_env_or_model_leaves_them(applier: ProfileApplier, settings_file: Path):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(json.dumps({"env": {"A": "1"}, "model": "sonnet"}), encoding="utf-8")

    applier.apply(ClaudeProfile())

    assert json.loads(settings_file.read_text(encoding="utf-8")) == {"env": {"A": "1"}, "model": "sonnet"}


def test_apply_treats_missing_or_corrupt_file_as_empty(applier: ProfileApplier, settings_file: Path):
    applier.apply(ClaudeProfile(model="opus"))
    assert json.loads(settings_file.read_text(encoding="utf-8")) == {"model": "opus"}

    settings_file.write_text("[not an object]", encoding="utf-8")
    applier.apply(ClaudeProfile(env={"K": "V"}))
    assert json.loads(settings_file.read_text(encoding="utf-8")) == {"env": {"K": "V"}}

# --------------------------------------------------------------------------- #
# Profile operations
# --------------------------------------------------------------------------- #
def test_switch_profile_applies_then_records(store: ConfigStore, applier: ProfileApplier, settings_file: Path,
                                             write_config, claude_document):
    write_config(claude_document)

    switch_profile(store, applier, "personal")

    assert store.load().config.claude.current == "personal"
    settings = json.loads(settings_file.read_text(encoding="utf-8"))
    assert settings == {"env": {"ANTHROPIC_AUTH_TOKEN": "sk-personal-0000"}}


def test_switch_to_unknown_profile(store: ConfigStore, applier: ProfileApplier, settings_file: Path,
                                   write_config, claude_document):
    write_config(claude_document)

    with pytest.raises(ProfileNotFoundError):
        switch_profile(store, applier, "nope")
    assert not settings_file.exists()
    assert store.load().config.claude.current == "work"


def test_switch_without_claude_section(store: ConfigStore, applier: ProfileApplier):
    with pytest.raises(ClaudeNotConfiguredError):
        switch_profile(store, applier, "work")


def test_get_current_profile(claude_document):
    name, profile = get_current_profile(validate_config(claude_document))
    assert name == "work"
    assert profile.model == "opus"

    claude_document["config"]["claude"]["current"] = "gone"
    assert get_current_profile(validate_config(claude_document)) is None

    del claude_document["config"]["claude"]
    assert get_current_profile(validate_config(claude_document)) is None


def test_add_update_remove_profile(store: ConfigStore):
    add_profile(store, "work", ClaudeProfile(model="opus"))
    with pytest.raises(ProfileExistsError):
        add_profile(store, "work", ClaudeProfile())

    update_profile(store, "work", ClaudeProfile(model="sonnet", extra_flag=True))
    profile = store.load().claude_profiles()["work"]
    assert profile.model == "sonnet"
    assert profile.model_extra == {"extra_flag": True}

    with pytest.raises(ProfileNotFoundError):
        update_profile(store, "missing", ClaudeProfile())


def test_remove_current_profile_clears_pointer(store: ConfigStore, write_config, claude_document):
    write_config(claude_document)

    remove_profile(store, "work")

    claude = store.load().config.claude
    assert claude.current is None
    assert list(claude.configs) == ["personal"]
    document = json.loads(store.config_file.read_text(encoding="utf-8"))
    assert "current" not in document["config"]["claude"]


@pytest.mark.parametrize("value, expected", [
    (None, "-"),
    ("", "-"),
    ("abc", "***"),
    ("sk-abc123456789", "sk-a*******6789"),
    ("12345678", "12345678"),
])
def test_mask_token(value, expected):
    assert mask_token(value) == expected
