# acs/core/paths.py

import os
import re
from pathlib import Path
from typing import Union

from acs.core.exceptions import ProjectPathError

# ==============================================================
# HOME RESOLUTION
# ==============================================================

HOME_ENV_VAR = "ACS_HOME"


def resolve_home() -> Path:
    """
    Home directory used for every well-known file:
    1. Environment variable ACS_HOME
    2. The current user's home directory
    """
    if env_home := os.getenv(HOME_ENV_VAR):
        return Path(env_home)
    return Path.home()

# ==============================================================
# NORMALIZATION
# ==============================================================

_SEPARATORS = re.compile(r"[/\\]+")


def normalize_path(value: Union[str, Path]) -> str:
    """
    Turn a user-typed path into an absolute, OS-native path.

    A leading ``~`` expands to the home directory, mixed ``/`` and ``\\``
    separators become ``os.sep`` and relative input is resolved against the
    current directory. No filesystem access; existence is the caller's
    concern.
    """
    trimmed = str(value).strip()
    if trimmed.startswith("~"):
        rest = trimmed[1:].lstrip("/\\")
        trimmed = os.path.join(str(Path.home()), rest) if rest else str(Path.home())
    native = _SEPARATORS.sub(lambda _: os.sep, trimmed)
    return os.path.abspath(native)


def format_path_for_display(path: Union[str, Path]) -> str:
    """Render a path with forward slashes for logs and UI output."""
    return str(path).replace("\\", "/")


def resolve_project_dir(value: Union[str, Path]) -> str:
    """
    Normalize a project path and check that it is an existing directory.

    Raises:
        ProjectPathError: the path does not exist or is not a directory
    """
    normalized = normalize_path(value)
    if not os.path.exists(normalized):
        raise ProjectPathError(normalized, ProjectPathError.NOT_EXISTS)
    if not os.path.isdir(normalized):
        raise ProjectPathError(normalized, ProjectPathError.NOT_DIRECTORY)
    return normalized
