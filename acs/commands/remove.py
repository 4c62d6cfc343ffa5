# acs/commands/remove.py

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, confirm, create_context, run_guarded, select_many
from acs.core.paths import format_path_for_display

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def remove_command(ctx: CommandContext) -> int:
    """Remove one or more registered projects after confirmation."""
    config = ctx.store.load()
    projects = config.projects
    t = ctx.t

    if not projects:
        ctx.console_awr.warn(t("remove.none"))
        return 0

    labels = [
        f"{escape(p.name)} [dim]({escape(format_path_for_display(p.path))})[/]" for p in projects
    ]
    picked = select_many(ctx, t("remove.promptSelect"), labels)
    if not picked:
        ctx.console_awr.warn(t("remove.cancelledNoSelection"))
        return 0

    if not confirm(ctx, t("remove.promptConfirm", count=len(picked))):
        ctx.console_awr.print(escape(t("remove.cancelled")))
        return 0

    removed = [projects[i] for i in picked]
    remaining = [p for i, p in enumerate(projects) if i not in picked]
    ctx.store.save(config.model_copy(update={"projects": remaining}))

    ctx.console_awr.success(
        t("remove.success", count=len(removed), names=", ".join(p.name for p in removed))
    )
    details = ", ".join(f"{p.name}({format_path_for_display(p.path)})" for p in removed)
    ctx.console_awr.log(escape(t("remove.debugDetails", details=details)))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the remove command (and its rm alias) with the Typer app."""

    def _run(verbose: bool):
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: remove_command(ctx))
        if code:
            raise typer.Exit(code=code)

    @app.command()
    def remove(
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Remove registered projects."""
        _run(verbose)

    @app.command("rm", hidden=True)
    def rm(
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Alias of remove."""
        _run(verbose)
