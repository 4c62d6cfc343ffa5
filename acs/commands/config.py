# acs/commands/config.py

"""
``acs config claude``: show and switch the Claude credential profiles.
"""

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded
from acs.core.claude import (
    AUTH_TOKEN_KEY,
    BASE_URL_KEY,
    ProfileApplier,
    get_claude_config,
    mask_token,
    switch_profile,
)
from acs.core.models import ClaudeProfile
from acs.core.paths import format_path_for_display


def print_profile(ctx: CommandContext, name: str, profile: ClaudeProfile, is_current: bool) -> None:
    marker = "[cyan]★[/]" if is_current else "[dim]•[/]"
    env = profile.env or {}
    ctx.console_awr.print(f"{marker} [bold]{escape(name)}[/]")
    ctx.console_awr.print(f"  {BASE_URL_KEY}: {escape(env.get(BASE_URL_KEY) or '-')}")
    ctx.console_awr.print(f"  {AUTH_TOKEN_KEY}: {escape(mask_token(env.get(AUTH_TOKEN_KEY)))}")
    ctx.console_awr.print(f"  model: {escape(profile.model or '-')}")

# ==============================================================
# COMMAND WRAPPERS
# ==============================================================

def claude_current_command(ctx: CommandContext) -> int:
    """Show the active Claude profile."""
    claude = get_claude_config(ctx.store.load())
    t = ctx.t

    if not claude.current:
        ctx.console_awr.warn(t("config.claude.currentUnset"))
        return 0

    profile = claude.configs.get(claude.current)
    if profile is None:
        ctx.console_awr.warn(t("config.claude.currentMissing", name=claude.current))
        return 0

    ctx.console_awr.print(f"[bold cyan]{escape(t('config.claude.currentTitle', name=claude.current))}[/]")
    print_profile(ctx, claude.current, profile, True)
    return 0


def claude_list_command(ctx: CommandContext) -> int:
    """Show every Claude profile, marking the active one."""
    claude = get_claude_config(ctx.store.load())
    t = ctx.t

    if not claude.configs:
        ctx.console_awr.warn(t("config.claude.noProfiles"))
        return 0

    ctx.console_awr.print(f"[bold cyan]{escape(t('config.claude.listHeader', count=len(claude.configs)))}[/]")
    for name, profile in claude.configs.items():
        print_profile(ctx, name, profile, claude.current == name)
    return 0


def claude_use_command(ctx: CommandContext, name: str) -> int:
    """Apply a profile to Claude's settings file and record it as active."""
    applier = ProfileApplier(home=ctx.store.home, console=ctx.console, verbose=ctx.verbose)
    settings_path = switch_profile(ctx.store, applier, name)

    ctx.console_awr.success(ctx.t("config.claude.use.updated", name=name))
    ctx.console_awr.log(escape(ctx.t("config.claude.use.settingsPath", path=format_path_for_display(settings_path))))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the config sub-app (with its claude group) with the Typer app."""
    config_app = typer.Typer(help="Manage provider configurations.", no_args_is_help=True)
    claude_app = typer.Typer(help="Manage Claude credential profiles.", no_args_is_help=True)
    config_app.add_typer(claude_app, name="claude")
    app.add_typer(config_app, name="config")

    def _run(body, verbose: bool):
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: body(ctx))
        if code:
            raise typer.Exit(code=code)

    @claude_app.command()
    def current(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Show the active profile."""
        _run(claude_current_command, verbose)

    @claude_app.command("list")
    def list_(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """List all profiles."""
        _run(claude_list_command, verbose)

    @claude_app.command("ls", hidden=True)
    def ls(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Alias of list."""
        _run(claude_list_command, verbose)

    @claude_app.command()
    def use(
        name: str = typer.Argument(..., help="Profile name."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Switch to a profile."""
        _run(lambda ctx: claude_use_command(ctx, name), verbose)
