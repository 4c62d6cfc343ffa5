# acs/core/config_store.py

"""
Persistence of the acs configuration document.

``ConfigStore`` is the only way other code reads or writes
``<home>/.acs/config.json``. Every call re-reads the file; nothing is cached
between invocations.
"""

from pathlib import Path
from typing import Any, Optional, Union

from acs.core.console import Console, ConsoleAware
from acs.core.exceptions import ConfigReadError, ConfigWriteError
from acs.core.file_io import durable_write_json, read_json
from acs.core.models import AcsConfig, default_config, validate_config
from acs.core.paths import format_path_for_display, resolve_home

CONFIG_DIR_NAME = ".acs"
CONFIG_FILE_NAME = "config.json"
BACKUP_SUFFIX = ".bak"

_UNREADABLE = object()

# ==============================================================
# CONFIG STORE CLASS
# ==============================================================

class ConfigStore(ConsoleAware):
    """Load, validate and atomically save the configuration document."""

    def __init__(self, home: Optional[Path] = None, console: Optional[Console] = None, verbose: bool = False):
        super().__init__(console, verbose)
        self.home: Path = Path(home) if home else resolve_home()
        self.config_dir: Path = self.home / CONFIG_DIR_NAME
        self.config_file: Path = self.config_dir / CONFIG_FILE_NAME
        self.backup_file: Path = self.config_dir / f"{CONFIG_FILE_NAME}{BACKUP_SUFFIX}"

    def config_path(self) -> Path:
        """Return the configuration file path, creating its directory if needed."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigWriteError(str(self.config_dir), cause=e) from e
        return self.config_file

    def backup_path(self) -> Path:
        return self.backup_file

    def load(self) -> AcsConfig:
        """
        Read and validate the configuration, writing the defaults first when
        no file exists yet. Project paths come back normalized.

        Raises:
            ConfigWriteError: the default document could not be written
            ConfigReadError: the file is unreadable, empty or not JSON
            ConfigFormatError: the document violates the schema (a bare `null` included)
        """
        path = self.config_path()

        if not path.exists():
            self.log(f"[bold magenta]config[/] → bootstrapping [cyan]{format_path_for_display(path)}[/]")
            try:
                durable_write_json(path, default_config().to_document(), self.backup_file)
            except OSError as e:
                raise ConfigWriteError(str(path), cause=e) from e

        try:
            raw = read_json(path, default=_UNREADABLE)
        except OSError as e:
            raise ConfigReadError(str(path), cause=e) from e
        if raw is _UNREADABLE:
            raise ConfigReadError(str(path))

        config = validate_config(raw, str(path))
        self.log(
            f"[bold magenta]config[/] → loaded {len(config.projects)} project(s), "
            f"{len(config.cli)} CLI tool(s)"
        )
        return config.with_normalized_paths()

    def save(self, config: Union[AcsConfig, Any]) -> None:
        """
        Validate and persist the configuration, all or nothing.

        The document is validated before the file is touched. The current
        file is backed up, the new content written and the backup removed;
        if the write fails the backup is restored before ConfigWriteError is
        raised, so the file always holds either the old or the new document.
        """
        path = self.config_path()
        raw = config.to_document() if isinstance(config, AcsConfig) else config
        validated = validate_config(raw, str(path))

        try:
            durable_write_json(path, validated.to_document(), self.backup_file)
        except OSError as e:
            raise ConfigWriteError(str(path), cause=e) from e

        self.log(f"[bold magenta]config[/] → saved [cyan]{format_path_for_display(path)}[/]")
