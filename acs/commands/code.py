# acs/commands/code.py

import os
from pathlib import Path

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded, select_one
from acs.core.paths import format_path_for_display
from acs.core.spawn import run_command

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def code_command(ctx: CommandContext) -> int:
    """Pick a project and a CLI tool, then run the tool inside the project."""
    config = ctx.store.load()
    t = ctx.t

    if not config.projects:
        ctx.console_awr.warn(t("code.noProjects"))
        return 1

    tools = config.sorted_cli()
    if not tools:
        ctx.console_awr.warn(t("code.noCli", path=format_path_for_display(ctx.store.config_path())))
        return 1

    labels = []
    missing = []
    for index, project in enumerate(config.projects):
        label = f"{escape(project.name)} [dim]({escape(format_path_for_display(project.path))})[/]"
        if not os.path.isdir(project.path):
            label = f"[strike]{label}[/][red]{escape(t('code.projectMissingSuffix'))}[/]"
            missing.append(index)
        labels.append(label)

    if len(missing) == len(labels):
        ctx.console_awr.error(t("code.noAvailableProjects"))
        return 1

    project = config.projects[select_one(ctx, t("code.promptProject"), labels, disabled=missing)]
    tool = tools[select_one(
        ctx,
        t("code.promptCli"),
        [f"{escape(tool.name)} [dim]({escape(tool.command)})[/]" for tool in tools],
    )]

    ctx.console_awr.print(
        f"🚀 {escape(t('code.execute', project=project.name, cli=tool.name))}"
    )
    exit_code = run_command(tool.command, cwd=Path(project.path), console_awr=ctx.console_awr)
    ctx.console_awr.log(escape(t("spawn.exitCode", command=tool.command, code=exit_code)))
    return exit_code

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the code command with the Typer app."""

    @app.command()
    def code(
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Run a CLI tool inside a registered project."""
        ctx = create_context(verbose)
        exit_code = run_guarded(ctx, lambda: code_command(ctx))
        if exit_code:
            raise typer.Exit(code=exit_code)
