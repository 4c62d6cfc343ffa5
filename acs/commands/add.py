# acs/commands/add.py

import os
from typing import Optional

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, ask_project_dir, confirm, create_context, run_guarded
from acs.core.models import Project
from acs.core.paths import format_path_for_display, resolve_project_dir

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def add_command(ctx: CommandContext, path: Optional[str] = None) -> int:
    """Register a project directory; its name is the directory's basename."""
    config = ctx.store.load()
    t = ctx.t

    if path is None:
        project_path = ask_project_dir(ctx, t("add.promptPath"))
    else:
        project_path = resolve_project_dir(path)
    project = Project(name=os.path.basename(project_path) or project_path, path=project_path)

    conflicts = config.find_project_conflicts(project.name, project.path)
    if conflicts:
        question = t("add.duplicatePath") if conflicts.by_key else t("add.duplicateName")
        if not confirm(ctx, question):
            ctx.console_awr.print(escape(t("add.cancelled")))
            return 0

    ctx.store.save(config.model_copy(update={"projects": [*config.projects, project]}))
    ctx.console_awr.success(
        t("add.success", name=project.name, path=format_path_for_display(project.path))
    )
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the add command with the Typer app."""

    @app.command()
    def add(
        path: Optional[str] = typer.Argument(None, help="Project directory; prompted for when omitted."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Register a project directory."""
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: add_command(ctx, path))
        if code:
            raise typer.Exit(code=code)
