# acs/commands/edit.py

import os

import typer
from rich.markup import escape

from acs.commands.common import (
    CommandContext,
    ask_project_dir,
    ask_text,
    confirm,
    create_context,
    run_guarded,
    select_one,
)
from acs.core.models import Project
from acs.core.paths import format_path_for_display

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def edit_command(ctx: CommandContext) -> int:
    """Change the path and name of one registered project."""
    config = ctx.store.load()
    projects = config.projects
    t = ctx.t

    if not projects:
        ctx.console_awr.warn(t("edit.none"))
        return 0

    labels = [
        f"{escape(p.name)} [dim]({escape(format_path_for_display(p.path))})[/]" for p in projects
    ]
    index = select_one(ctx, t("edit.promptSelect"), labels)
    target = projects[index]

    new_path = ask_project_dir(ctx, t("edit.promptPath"), default=target.path)
    new_name = ask_text(
        ctx,
        t("edit.promptName"),
        default=target.name or os.path.basename(new_path),
        error_key="edit.validateName",
    )

    if new_name == target.name and new_path == target.path:
        ctx.console_awr.print(escape(t("edit.noChanges")))
        return 0

    conflicts = config.find_project_conflicts(new_name, new_path, exclude=index)
    if conflicts:
        question = t("edit.duplicatePath") if conflicts.by_key else t("edit.duplicateName")
        if not confirm(ctx, question):
            ctx.console_awr.print(escape(t("edit.cancelled")))
            return 0

    updated = list(projects)
    updated[index] = Project(name=new_name, path=new_path)
    ctx.store.save(config.model_copy(update={"projects": updated}))

    ctx.console_awr.success(t("edit.success", name=new_name, path=format_path_for_display(new_path)))
    ctx.console_awr.log(escape(t(
        "edit.debugUpdated",
        previousName=target.name,
        previousPath=format_path_for_display(target.path),
        name=new_name,
        path=format_path_for_display(new_path),
    )))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the edit command with the Typer app."""

    @app.command()
    def edit(
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Edit a registered project."""
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: edit_command(ctx))
        if code:
            raise typer.Exit(code=code)
