# acs/core/exceptions.py

"""
acs domain-specific exceptions.

Library code under acs.core raises these; the command modules catch them,
translate them for the user and exit with a non-zero status.
"""

from dataclasses import dataclass
from typing import List, Optional


class AcsError(Exception):
    """Base exception for all acs errors."""
    pass

# ==============================================================
# CONFIGURATION ERRORS
# ==============================================================

@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation: dotted location in the document and the reason."""
    field_path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field_path or '<root>'}: {self.reason}"


class ConfigError(AcsError):
    """Base exception for configuration read/validate/write failures."""
    code: str = "config_error"

    def __init__(self, path: str, message: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(message)


class ConfigReadError(ConfigError):
    """Raised when a JSON file exists but cannot be read or parsed."""
    code = "read_failed"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(path, f"Cannot read configuration file {path}", cause)


class ConfigFormatError(ConfigError):
    """Raised when a document does not satisfy the configuration schema."""
    code = "invalid_format"

    def __init__(self, path: str, issues: List[ValidationIssue], cause: Optional[BaseException] = None):
        self.issues = list(issues)
        details = "\n".join(f"    → {issue}" for issue in self.issues)
        super().__init__(path, f"Invalid configuration file {path}:\n{details}", cause)


class ConfigWriteError(ConfigError):
    """Raised when writing a JSON file fails at the OS level."""
    code = "write_failed"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.error_message = str(cause) if cause else ""
        super().__init__(path, f"Failed to write {path}: {self.error_message}", cause)

# ==============================================================
# PROFILE ERRORS
# ==============================================================

class ProfileError(AcsError):
    """Base exception for credential profile errors."""
    pass

class ClaudeNotConfiguredError(ProfileError):
    """Raised when the configuration has no claude provider section."""
    def __init__(self):
        super().__init__("No Claude profiles are configured")

class ProfileNotFoundError(ProfileError):
    """Raised when a named profile does not exist."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Profile '{name}' not found")

class ProfileExistsError(ProfileError):
    """Raised when adding a profile whose name is already taken."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Profile '{name}' already exists")

# ==============================================================
# USAGE ERRORS
# ==============================================================

class UnsupportedLanguageError(AcsError):
    """Raised when a language tag is not one of the supported ones."""
    def __init__(self, language: str, supported: List[str]):
        self.language = language
        self.supported = supported
        super().__init__(
            f"Unsupported language '{language}'. Supported: {', '.join(supported)}"
        )

class ProjectPathError(AcsError):
    """Raised when a project path is missing or not a directory."""
    NOT_EXISTS = "not_exists"
    NOT_DIRECTORY = "not_directory"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        detail = "path does not exist" if reason == self.NOT_EXISTS else "not a directory"
        super().__init__(f"Invalid project path {path}: {detail}")

# ==============================================================
# PROCESS ERRORS
# ==============================================================

class CommandParseError(AcsError):
    """Raised when a CLI command string contains no executable."""
    def __init__(self, command_line: str):
        self.command_line = command_line
        super().__init__(f"No executable in command line '{command_line}'")

class CommandNotFoundError(AcsError):
    """Raised when the executable of a CLI tool cannot be found."""
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command not found: {command}")

class UnsupportedCliError(AcsError):
    """Raised when a CLI command has no known rule file."""
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"No rule file is known for CLI '{command}'")

class RuleSourceError(AcsError):
    """Raised when the source file of a rule file is missing."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Rule source file not found: {path}")
