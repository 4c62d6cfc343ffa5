# tests/test_models.py

import pytest

from acs.core.exceptions import ConfigFormatError
from acs.core.models import (
    AcsConfig,
    CliTool,
    Language,
    Project,
    default_config,
    validate_config,
)


def test_default_config_seed():
    config = default_config()

    assert config.language == Language.ZH
    assert config.projects == []
    assert [(tool.name, tool.command, tool.order) for tool in config.cli] == [
        ("CodeX", "codex", 1),
        ("Claude Code", "claude", 2),
        ("Gemini Cli", "gemini", 3),
    ]
    assert config.config.claude is None
    assert config.to_document() == {
        "language": "zh",
        "projects": [],
        "cli": [
            {"name": "CodeX", "command": "codex", "order": 1},
            {"name": "Claude Code", "command": "claude", "order": 2},
            {"name": "Gemini Cli", "command": "gemini", "order": 3},
        ],
        "config": {},
    }


def test_validation_reports_every_issue():
    raw = {
        "language": "fr",
        "projects": [{"name": "", "path": "/tmp/x"}],
        "cli": [{"name": "x", "command": "x", "order": -1}],
    }

    with pytest.raises(ConfigFormatError) as exc:
        validate_config(raw, "/home/me/.acs/config.json")

    paths = {issue.field_path for issue in exc.value.issues}
    assert {"language", "projects.0.name", "cli.0.order"} <= paths
    assert exc.value.path == "/home/me/.acs/config.json"
    assert exc.value.code == "invalid_format"


@pytest.mark.parametrize("order", [1.5, "2", True])
def test_order_must_be_an_integer(order):
    with pytest.raises(ConfigFormatError):
        validate_config({"cli": [{"name": "x", "command": "x", "order": order}]})


def test_root_must_be_an_object():
    with pytest.raises(ConfigFormatError) as exc:
        validate_config([1, 2, 3])
    assert exc.value.issues


def test_unknown_profile_and_provider_keys_round_trip(claude_document):
    claude_document["config"]["openai"] = {"key": "value"}

    config = validate_config(claude_document)
    document = config.to_document()

    personal = document["config"]["claude"]["configs"]["personal"]
    assert personal == {"env": {"ANTHROPIC_AUTH_TOKEN": "sk-personal-0000"}, "note": "kept as-is"}
    assert "model" not in personal
    assert document["config"]["openai"] == {"key": "value"}


def test_order_is_omitted_when_unset():
    assert CliTool(name="a", command="a").model_dump(mode="json") == {"name": "a", "command": "a"}


def test_sorted_cli_by_order_then_name():
    config = AcsConfig(cli=[
        CliTool(name="b", command="b", order=2),
        CliTool(name="z", command="z"),
        CliTool(name="a", command="a", order=2),
        CliTool(name="c", command="c", order=1),
    ])
    assert [tool.name for tool in config.sorted_cli()] == ["z", "c", "a", "b"]


def test_find_project_conflicts(tmp_path):
    one = str(tmp_path / "one")
    config = AcsConfig(projects=[Project(name="one", path=one), Project(name="two", path=str(tmp_path / "two"))])

    conflicts = config.find_project_conflicts("other", one)
    assert conflicts
    assert conflicts.by_key.name == "one"
    assert conflicts.by_name is None

    assert not config.find_project_conflicts("one", one, exclude=0)
    assert config.find_project_conflicts("two", str(tmp_path / "new")).by_name.name == "two"


def test_find_cli_conflicts():
    config = AcsConfig(cli=[CliTool(name="Claude", command="claude")])

    assert config.find_cli_conflicts("Other", "claude").by_key is not None
    assert config.find_cli_conflicts("Claude", "x").by_name is not None
    assert not config.find_cli_conflicts("Claude", "claude", exclude=0)
