# acs/commands/rules.py

"""
``acs rules``: write the rule (instruction) file of a CLI tool, globally or
into a project, from a local markdown source file.
"""

from pathlib import Path

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded
from acs.core.exceptions import RuleSourceError, UnsupportedCliError
from acs.core.paths import format_path_for_display, normalize_path
from acs.core.rules import resolve_rule_target, write_global_rule_file, write_project_rule_file


def read_source(source: str) -> str:
    path = Path(normalize_path(source))
    if not path.is_file():
        raise RuleSourceError(str(path))
    return path.read_text(encoding="utf-8")


def _report(ctx: CommandContext, written: Path) -> None:
    ctx.console_awr.success(ctx.t("rules.written", path=format_path_for_display(written)))
    backup = written.with_name(written.name + ".bak")
    if backup.exists():
        ctx.console_awr.print(f"[dim]{escape(ctx.t('rules.backup', path=format_path_for_display(backup)))}[/]")

# ==============================================================
# COMMAND WRAPPERS
# ==============================================================

def rules_global_command(ctx: CommandContext, command: str, source: str) -> int:
    if resolve_rule_target(command) is None:
        raise UnsupportedCliError(command)
    content = read_source(source)
    _report(ctx, write_global_rule_file(command, content, home=ctx.store.home))
    return 0


def rules_project_command(ctx: CommandContext, command: str, project_path: str, source: str) -> int:
    if resolve_rule_target(command) is None:
        raise UnsupportedCliError(command)
    content = read_source(source)
    _report(ctx, write_project_rule_file(project_path, command, content))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the rules sub-app with the Typer app."""
    rules_app = typer.Typer(help="Write CLI rule files (CLAUDE.md, AGENTS.md, GEMINI.md).", no_args_is_help=True)
    app.add_typer(rules_app, name="rules")

    def _run(body, verbose: bool):
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: body(ctx))
        if code:
            raise typer.Exit(code=code)

    @rules_app.command("global")
    def global_(
        command: str = typer.Argument(..., help="CLI command, e.g. claude, codex or gemini."),
        source: str = typer.Option(..., "--file", "-f", help="Markdown file with the rules."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Write the CLI's global rule file."""
        _run(lambda ctx: rules_global_command(ctx, command, source), verbose)

    @rules_app.command()
    def project(
        command: str = typer.Argument(..., help="CLI command, e.g. claude, codex or gemini."),
        project_path: str = typer.Argument(..., help="Project directory."),
        source: str = typer.Option(..., "--file", "-f", help="Markdown file with the rules."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Write the CLI's rule file into a project."""
        _run(lambda ctx: rules_project_command(ctx, command, project_path, source), verbose)
