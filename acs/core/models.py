# acs/core/models.py

"""
Configuration schema for acs.

This module defines the shape of ``~/.acs/config.json``, its validation
rules and the document written on first run. Credential profiles and the
provider section accept unknown keys and write them back untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    model_serializer,
)

from acs.core.exceptions import ConfigFormatError, ValidationIssue
from acs.core.paths import normalize_path

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
OrderKey = Annotated[int, Field(strict=True, ge=0)]

T = TypeVar("T")

# ==============================================================
# ENUMS
# ==============================================================

class Language(str, Enum):
    """Supported interface languages."""
    ZH = "zh"
    EN = "en"
    JA = "ja"

DEFAULT_LANGUAGE = Language.ZH

# ==============================================================
# BASE DOCUMENT MODEL
# ==============================================================

class DocumentModel(BaseModel):
    """Base model whose optional fields are left out of the JSON when unset."""

    omit_if_none: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def serialize_document(self, handler):
        data = handler(self)
        for name in self.omit_if_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data

# ==============================================================
# ENTRIES
# ==============================================================

class Project(DocumentModel):
    """A registered project directory."""

    name: NonEmptyStr = Field(..., description="Display name, unique by convention")
    path: NonEmptyStr = Field(..., description="Absolute, OS-native directory path")


class CliTool(DocumentModel):
    """A launcher command that can be run inside a project."""

    omit_if_none = ("order",)

    name: NonEmptyStr = Field(..., description="Display name")
    command: NonEmptyStr = Field(..., description="Command line to execute")
    order: Optional[OrderKey] = Field(default=None, description="Sort key, ascending")

    @property
    def sort_order(self) -> int:
        return self.order if self.order is not None else 0

# ==============================================================
# CREDENTIAL PROFILES
# ==============================================================

class ClaudeProfile(DocumentModel):
    """
    A named credential bundle for Claude.

    ``env`` and ``model`` are the keys acs understands; anything else is kept
    in ``model_extra`` and written back as-is.
    """

    model_config = ConfigDict(extra="allow")
    omit_if_none = ("env", "model")

    env: Optional[Dict[str, str]] = Field(default=None, description="Environment variables")
    model: Optional[NonEmptyStr] = Field(default=None, description="Default model identifier")


class ClaudeConfig(DocumentModel):
    """Claude provider section: the profiles plus the active profile pointer."""

    omit_if_none = ("current",)

    current: Optional[NonEmptyStr] = Field(
        default=None,
        description="Name of the active profile; may dangle"
    )
    configs: Dict[NonEmptyStr, ClaudeProfile] = Field(default_factory=dict)


class ProviderConfigs(DocumentModel):
    """Per-provider credential sections, keyed by provider name."""

    model_config = ConfigDict(extra="allow")
    omit_if_none = ("claude",)

    claude: Optional[ClaudeConfig] = None

# ==============================================================
# ROOT DOCUMENT
# ==============================================================

@dataclass
class Conflicts(Generic[T]):
    """Entries clashing with a candidate, by name and by secondary key."""
    by_name: Optional[T] = None
    by_key: Optional[T] = None

    def __bool__(self) -> bool:
        return self.by_name is not None or self.by_key is not None


class AcsConfig(DocumentModel):
    """The whole configuration document."""

    language: Language = Field(default=DEFAULT_LANGUAGE)
    projects: List[Project] = Field(default_factory=list)
    cli: List[CliTool] = Field(default_factory=list)
    config: ProviderConfigs = Field(default_factory=ProviderConfigs)

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON-ready document."""
        return self.model_dump(mode="json")

    def with_normalized_paths(self) -> "AcsConfig":
        projects = [
            p.model_copy(update={"path": normalize_path(p.path)}) for p in self.projects
        ]
        return self.model_copy(update={"projects": projects})

    def sorted_cli(self) -> List[CliTool]:
        """CLI tools by order (missing order counts as 0), then by name."""
        return sorted(self.cli, key=lambda tool: (tool.sort_order, tool.name))

    def claude_profiles(self) -> Dict[str, ClaudeProfile]:
        claude = self.config.claude
        return dict(claude.configs) if claude else {}

    def find_project_conflicts(
        self, name: str, path: str, exclude: Optional[int] = None
    ) -> Conflicts[Project]:
        """Find projects (other than index ``exclude``) sharing the name or the path."""
        normalized = normalize_path(path)
        conflicts: Conflicts[Project] = Conflicts()
        for index, project in enumerate(self.projects):
            if index == exclude:
                continue
            if conflicts.by_name is None and project.name == name:
                conflicts.by_name = project
            if conflicts.by_key is None and project.path == normalized:
                conflicts.by_key = project
        return conflicts

    def find_cli_conflicts(
        self, name: str, command: str, exclude: Optional[int] = None
    ) -> Conflicts[CliTool]:
        """Find CLI tools (other than index ``exclude``) sharing the name or the command."""
        conflicts: Conflicts[CliTool] = Conflicts()
        for index, tool in enumerate(self.cli):
            if index == exclude:
                continue
            if conflicts.by_name is None and tool.name == name:
                conflicts.by_name = tool
            if conflicts.by_key is None and tool.command == command:
                conflicts.by_key = tool
        return conflicts

# ==============================================================
# VALIDATION AND DEFAULTS
# ==============================================================

def _issues_from(error: ValidationError) -> List[ValidationIssue]:
    return [
        ValidationIssue(
            field_path=".".join(str(part) for part in item["loc"]),
            reason=item["msg"],
        )
        for item in error.errors()
    ]


def validate_config(raw: Any, path: str = "") -> AcsConfig:
    """
    Validate a raw JSON value against the schema.

    Raises:
        ConfigFormatError: listing every violated field, not only the first.
    """
    try:
        return AcsConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigFormatError(path, _issues_from(e), cause=e) from e


def default_config() -> AcsConfig:
    """The document written when no configuration file exists yet."""
    return AcsConfig(
        language=DEFAULT_LANGUAGE,
        projects=[],
        cli=[
            CliTool(name="CodeX", command="codex", order=1),
            CliTool(name="Claude Code", command="claude", order=2),
            CliTool(name="Gemini Cli", command="gemini", order=3),
        ],
        config=ProviderConfigs(),
    )
