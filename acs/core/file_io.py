# acs/core/file_io.py

"""
JSON file primitives shared by the configuration store and the profile applier.

Reads are forgiving (a missing or corrupt file is simply absent); writes
raise ``OSError`` and leave recovery to ``durable_write_json``, which keeps
a backup of the previous content and puts it back when a write fails.
"""

import json
import shutil
from pathlib import Path
from typing import Any, Optional


def read_json(path: Path, default: Any = None) -> Optional[Any]:
    """
    Return the parsed JSON value at path, or default if missing or not valid
    JSON. Pass a sentinel as default to tell a file holding `null` apart from
    an unreadable one.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return default
    except UnicodeDecodeError:
        return default

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return default


def write_json(path: Path, value: Any) -> None:
    """Write value as pretty-printed JSON with a trailing newline."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(value, indent=2, ensure_ascii=False)
    path.write_text(content + "\n", encoding="utf-8")


def backup_file(path: Path, backup_path: Path) -> bool:
    """Copy path to backup_path. Returns False when there is nothing to back up."""
    path = Path(path)
    if not path.exists():
        return False
    Path(backup_path).parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(path, backup_path)
    return True


def restore_backup(backup_path: Path, path: Path) -> bool:
    """Copy backup_path back over path. Returns False when no backup exists."""
    backup_path = Path(backup_path)
    if not backup_path.exists():
        return False
    shutil.copyfile(backup_path, path)
    return True


def remove_file_if_exists(path: Path) -> None:
    Path(path).unlink(missing_ok=True)


def durable_write_json(path: Path, value: Any, backup_path: Path) -> None:
    """
    Replace the JSON file at path with value, all or nothing.

    The current file is copied to backup_path first. If the write fails the
    backup is restored (or, when there was no previous file, the partial
    file is removed) and the original OSError is re-raised. The backup is
    removed only after a successful write.
    """
    had_previous = backup_file(path, backup_path)
    try:
        write_json(path, value)
    except OSError:
        if had_previous:
            restore_backup(backup_path, path)
        else:
            remove_file_if_exists(path)
        raise
    remove_file_if_exists(backup_path)


def write_text_with_backup(path: Path, content: str, backup_path: Path) -> None:
    """Write a text file, keeping the previous content in backup_path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    backup_file(path, backup_path)
    path.write_text(content or "", encoding="utf-8")
