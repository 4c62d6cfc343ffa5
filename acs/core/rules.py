# acs/core/rules.py

"""
Rule (instruction) files of the supported AI CLIs.

Each CLI reads a markdown file either from its global dotfile directory or
from the project root. Writing one keeps the previous content in ``.bak``.
"""

import re
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath
from typing import Dict, Optional

from acs.core.config_store import BACKUP_SUFFIX
from acs.core.exceptions import UnsupportedCliError
from acs.core.file_io import write_text_with_backup
from acs.core.paths import resolve_home, resolve_project_dir


@dataclass(frozen=True)
class RuleTarget:
    file_name: str
    global_dir: str


CLI_RULE_TARGETS: Dict[str, RuleTarget] = {
    "claude": RuleTarget(file_name="CLAUDE.md", global_dir=".claude"),
    "codex": RuleTarget(file_name="AGENTS.md", global_dir=".codex"),
    "gemini": RuleTarget(file_name="GEMINI.md", global_dir=".gemini"),
}

_EXECUTABLE_SUFFIX = re.compile(r"\.(exe|bat|cmd)$")


def extract_cli_key(command_line: str) -> Optional[str]:
    """``C:\\tools\\Codex.EXE --x`` → ``codex``."""
    tokens = (command_line or "").split()
    if not tokens:
        return None
    base_name = PureWindowsPath(tokens[0]).name.lower()
    return _EXECUTABLE_SUFFIX.sub("", base_name)


def resolve_rule_target(command_line: str) -> Optional[RuleTarget]:
    key = extract_cli_key(command_line)
    if not key:
        return None
    return CLI_RULE_TARGETS.get(key)


def get_rule_file_name(command_line: str) -> Optional[str]:
    target = resolve_rule_target(command_line)
    return target.file_name if target else None


def get_global_rule_dir(command_line: str, home: Optional[Path] = None) -> Optional[Path]:
    target = resolve_rule_target(command_line)
    if target is None:
        return None
    return (Path(home) if home else resolve_home()) / target.global_dir


def _require_target(command_line: str) -> RuleTarget:
    target = resolve_rule_target(command_line)
    if target is None:
        raise UnsupportedCliError(command_line)
    return target


def write_global_rule_file(command_line: str, content: str, home: Optional[Path] = None) -> Path:
    """Write the CLI's global rule file and return its path."""
    target = _require_target(command_line)
    base = Path(home) if home else resolve_home()
    file_path = base / target.global_dir / target.file_name
    write_text_with_backup(file_path, content, file_path.with_name(target.file_name + BACKUP_SUFFIX))
    return file_path


def write_project_rule_file(project_path: str, command_line: str, content: str) -> Path:
    """Write the CLI's rule file into a project directory and return its path."""
    target = _require_target(command_line)
    project_dir = Path(resolve_project_dir(project_path))

    file_path = project_dir / target.file_name
    write_text_with_backup(file_path, content, file_path.with_name(target.file_name + BACKUP_SUFFIX))
    return file_path
