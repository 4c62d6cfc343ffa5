# acs/core/claude.py

"""
Claude credential profiles.

``ProfileApplier`` merges a profile into Claude's own settings file
(``<home>/.claude/settings.json``), a file acs does not own: only the
``env`` and ``model`` keys are replaced, everything else is preserved.
The functions below implement the profile operations shared by the CLI and
the admin server on top of ``ConfigStore``.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from acs.core.config_store import BACKUP_SUFFIX, ConfigStore
from acs.core.console import Console, ConsoleAware
from acs.core.exceptions import (
    ClaudeNotConfiguredError,
    ConfigReadError,
    ConfigWriteError,
    ProfileExistsError,
    ProfileNotFoundError,
)
from acs.core.file_io import durable_write_json, read_json
from acs.core.models import AcsConfig, ClaudeConfig, ClaudeProfile
from acs.core.paths import format_path_for_display, resolve_home

CLAUDE_PROVIDER = "claude"
CLAUDE_SETTINGS_DIR = ".claude"
CLAUDE_SETTINGS_FILE = "settings.json"

BASE_URL_KEY = "ANTHROPIC_BASE_URL"
AUTH_TOKEN_KEY = "ANTHROPIC_AUTH_TOKEN"

# ==============================================================
# PROFILE APPLIER
# ==============================================================

class ProfileApplier(ConsoleAware):
    """Writes a profile's env and model into Claude's settings file."""

    def __init__(self, home: Optional[Path] = None, console: Optional[Console] = None, verbose: bool = False):
        super().__init__(console, verbose)
        self.home: Path = Path(home) if home else resolve_home()
        self.settings_file: Path = self.home / CLAUDE_SETTINGS_DIR / CLAUDE_SETTINGS_FILE
        self.backup_file: Path = self.settings_file.with_name(f"{CLAUDE_SETTINGS_FILE}{BACKUP_SUFFIX}")

    def settings_path(self) -> Path:
        return self.settings_file

    def apply(self, profile: ClaudeProfile) -> Path:
        """
        Merge profile into the settings file and return the path written.

        A missing, corrupt or non-object settings file counts as empty. ``env``
        is replaced as a whole (not key by key) when the profile defines it;
        ``model`` is replaced when defined; other keys are left untouched.
        """
        path = self.settings_file
        try:
            current = read_json(path)
        except OSError as e:
            raise ConfigReadError(str(path), cause=e) from e

        settings: Dict[str, Any] = dict(current) if isinstance(current, dict) else {}
        if profile.env is not None:
            settings["env"] = dict(profile.env)
        if profile.model:
            settings["model"] = profile.model

        try:
            durable_write_json(path, settings, self.backup_file)
        except OSError as e:
            raise ConfigWriteError(str(path), cause=e) from e

        self.log(f"[bold magenta]claude[/] → wrote [cyan]{format_path_for_display(path)}[/]")
        return path

# ==============================================================
# PROFILE OPERATIONS
# ==============================================================

def get_claude_config(config: AcsConfig) -> ClaudeConfig:
    """Return the claude section or raise ClaudeNotConfiguredError."""
    claude = config.config.claude
    if claude is None:
        raise ClaudeNotConfiguredError()
    return claude


def get_current_profile(config: AcsConfig) -> Optional[Tuple[str, ClaudeProfile]]:
    """
    Return (name, profile) for the active profile.

    None when there is no claude section, no active pointer, or the pointer
    names a profile that does not exist.
    """
    claude = config.config.claude
    if claude is None or not claude.current:
        return None
    profile = claude.configs.get(claude.current)
    if profile is None:
        return None
    return claude.current, profile


def _with_claude(config: AcsConfig, claude: ClaudeConfig) -> AcsConfig:
    providers = config.config.model_copy(update={"claude": claude})
    return config.model_copy(update={"config": providers})


def switch_profile(store: ConfigStore, applier: ProfileApplier, name: str) -> Path:
    """
    Apply profile ``name`` to the settings file, then record it as current.

    The two writes are not transactional: the settings file is written
    first, so a failure in between leaves the previous profile recorded.
    """
    config = store.load()
    claude = get_claude_config(config)
    profile = claude.configs.get(name)
    if profile is None:
        raise ProfileNotFoundError(name)

    settings_path = applier.apply(profile)
    store.save(_with_claude(config, claude.model_copy(update={"current": name})))
    return settings_path


def add_profile(store: ConfigStore, name: str, profile: ClaudeProfile) -> AcsConfig:
    """Add a new profile, creating the claude section if needed."""
    config = store.load()
    claude = config.config.claude or ClaudeConfig()
    if name in claude.configs:
        raise ProfileExistsError(name)

    configs = dict(claude.configs)
    configs[name] = profile
    updated = _with_claude(config, claude.model_copy(update={"configs": configs}))
    store.save(updated)
    return updated


def update_profile(store: ConfigStore, name: str, profile: ClaudeProfile) -> AcsConfig:
    """Replace an existing profile as a whole."""
    config = store.load()
    claude = get_claude_config(config)
    if name not in claude.configs:
        raise ProfileNotFoundError(name)

    configs = dict(claude.configs)
    configs[name] = profile
    updated = _with_claude(config, claude.model_copy(update={"configs": configs}))
    store.save(updated)
    return updated


def remove_profile(store: ConfigStore, name: str) -> AcsConfig:
    """Remove a profile; the active pointer is cleared if it named it."""
    config = store.load()
    claude = get_claude_config(config)
    if name not in claude.configs:
        raise ProfileNotFoundError(name)

    configs = {key: value for key, value in claude.configs.items() if key != name}
    current = None if claude.current == name else claude.current
    updated = _with_claude(config, ClaudeConfig(current=current, configs=configs))
    store.save(updated)
    return updated


def mask_token(value: Optional[str]) -> str:
    """Hide the middle of a secret: ``sk-abc123456789`` → ``sk-a*******6789``."""
    if not value:
        return "-"
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:4]}{'*' * max(len(value) - 8, 0)}{value[-4:]}"
