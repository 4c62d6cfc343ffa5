# acs/commands/list_projects.py

import json

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded
from acs.core.paths import format_path_for_display

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def list_command(ctx: CommandContext, as_json: bool = False) -> int:
    """Print the registered projects, or their raw JSON."""
    config = ctx.store.load()
    projects = config.projects
    t = ctx.t

    if as_json:
        typer.echo(json.dumps([p.model_dump(mode="json") for p in projects], indent=2, ensure_ascii=False))
        return 0

    if not projects:
        ctx.console_awr.print(f"[dim]{escape(t('list.empty'))}[/]")
        return 0

    ctx.console_awr.print(f"[bold cyan]{escape(t('list.summary', count=len(projects)))}[/]")
    for index, project in enumerate(projects, start=1):
        ctx.console_awr.print(
            f"{index}. [bold]{escape(project.name)}[/] -> [dim]{escape(format_path_for_display(project.path))}[/]"
        )

    ctx.console_awr.log(t("list.debugCount", count=len(projects)))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the list command (and its ls alias) with the Typer app."""

    def _run(as_json: bool, verbose: bool):
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: list_command(ctx, as_json), spaced=not as_json)
        if code:
            raise typer.Exit(code=code)

    @app.command("list")
    def list_(
        as_json: bool = typer.Option(False, "--json", help="Print the projects as JSON."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """List the registered projects."""
        _run(as_json, verbose)

    @app.command("ls", hidden=True)
    def ls(
        as_json: bool = typer.Option(False, "--json", help="Print the projects as JSON."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Alias of list."""
        _run(as_json, verbose)
