# acs/core/spawn.py

import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from acs.core.console import ConsoleAware
from acs.core.exceptions import CommandNotFoundError, CommandParseError
from acs.core.paths import format_path_for_display


def parse_command(command_line: str) -> Tuple[str, List[str]]:
    """Split a command line into the executable and its arguments, honouring quotes."""
    try:
        tokens = shlex.split(command_line.strip(), posix=os.name != "nt")
    except ValueError as e:
        raise CommandParseError(command_line) from e

    if os.name == "nt":
        tokens = [token.strip("\"'") for token in tokens]
    if not tokens or not tokens[0]:
        raise CommandParseError(command_line)
    return tokens[0], tokens[1:]


def run_command(command_line: str, cwd: Optional[Path] = None, console_awr: Optional[ConsoleAware] = None) -> int:
    """Run a CLI tool with inherited stdio and return its exit code."""
    command, args = parse_command(command_line)

    if console_awr:
        location = format_path_for_display(cwd) if cwd else "."
        console_awr.log(f"[bold magenta]spawn[/] → {' '.join([command, *args])} @ [cyan]{location}[/]")

    try:
        completed = subprocess.run([command, *args], cwd=cwd, shell=False)
    except FileNotFoundError as e:
        raise CommandNotFoundError(command) from e

    return completed.returncode
