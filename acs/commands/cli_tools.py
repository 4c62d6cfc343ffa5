# acs/commands/cli_tools.py

"""
``acs cli``: manage the list of CLI tools that ``acs code`` can launch.
"""

import json
from typing import Optional

import typer
from rich.markup import escape
from rich.prompt import Prompt

from acs.commands.common import (
    CommandContext,
    ask_text,
    confirm,
    create_context,
    run_guarded,
    select_one,
)
from acs.core.models import CliTool

# ==============================================================
# PROMPTS
# ==============================================================

def ask_order(ctx: CommandContext, default: int = 0) -> int:
    """Ask for a non-negative integer order key."""
    while True:
        answer = Prompt.ask(escape(ctx.t("cli.promptOrder")), default=str(default), console=ctx.console)
        value = (answer or "").strip()
        if value.isdigit():
            return int(value)
        ctx.console_awr.print(f"[red]{escape(ctx.t('cli.validateOrder'))}[/]")


def ask_tool(ctx: CommandContext, current: Optional[CliTool] = None) -> CliTool:
    t = ctx.t
    name = ask_text(ctx, t("cli.promptName"), default=current.name if current else None, error_key="cli.validateName")
    command = ask_text(ctx, t("cli.promptCommand"), default=current.command if current else None, error_key="cli.validateCommand")
    order = ask_order(ctx, current.sort_order if current else 0)
    return CliTool(name=name, command=command, order=order)


def _tool_label(tool: CliTool) -> str:
    return f"{escape(tool.name)} [dim]({escape(tool.command)})[/]"

# ==============================================================
# COMMAND WRAPPERS
# ==============================================================

def cli_list_command(ctx: CommandContext, as_json: bool = False) -> int:
    """Print the CLI tools sorted by order, then name."""
    config = ctx.store.load()
    t = ctx.t

    if as_json:
        typer.echo(json.dumps([tool.model_dump(mode="json") for tool in config.cli], indent=2, ensure_ascii=False))
        return 0

    tools = config.sorted_cli()
    if not tools:
        ctx.console_awr.print(f"[dim]{escape(t('cli.list.empty'))}[/]")
        return 0

    ctx.console_awr.print(f"[bold cyan]{escape(t('cli.list.summary', count=len(tools)))}[/]")
    for index, tool in enumerate(tools, start=1):
        order_info = f" \\[{tool.order}]" if tool.order is not None else ""
        ctx.console_awr.print(f"{index}. [bold]{escape(tool.name)}{order_info}[/] -> [dim]{escape(tool.command)}[/]")
    return 0


def cli_add_command(ctx: CommandContext) -> int:
    config = ctx.store.load()
    t = ctx.t

    tool = ask_tool(ctx)
    conflicts = config.find_cli_conflicts(tool.name, tool.command)
    if conflicts:
        question = t("cli.duplicateCommand") if conflicts.by_key else t("cli.duplicateName")
        if not confirm(ctx, question):
            ctx.console_awr.print(escape(t("cli.add.cancelled")))
            return 0

    ctx.store.save(config.model_copy(update={"cli": [*config.cli, tool]}))
    ctx.console_awr.success(t("cli.add.success", name=tool.name, command=tool.command))
    return 0


def cli_edit_command(ctx: CommandContext) -> int:
    config = ctx.store.load()
    tools = config.cli
    t = ctx.t

    if not tools:
        ctx.console_awr.warn(t("cli.edit.none"))
        return 0

    index = select_one(ctx, t("cli.edit.promptSelect"), [_tool_label(tool) for tool in tools])
    target = tools[index]
    edited = ask_tool(ctx, target)

    if (edited.name, edited.command, edited.sort_order) == (target.name, target.command, target.sort_order):
        ctx.console_awr.print(escape(t("cli.edit.noChanges")))
        return 0

    conflicts = config.find_cli_conflicts(edited.name, edited.command, exclude=index)
    if conflicts:
        question = t("cli.duplicateCommand") if conflicts.by_key else t("cli.duplicateName")
        if not confirm(ctx, question):
            ctx.console_awr.print(escape(t("cli.edit.cancelled")))
            return 0

    updated = list(tools)
    updated[index] = edited
    ctx.store.save(config.model_copy(update={"cli": updated}))
    ctx.console_awr.success(t("cli.edit.success", name=edited.name, command=edited.command))
    return 0


def cli_remove_command(ctx: CommandContext) -> int:
    config = ctx.store.load()
    tools = config.cli
    t = ctx.t

    if not tools:
        ctx.console_awr.warn(t("cli.remove.none"))
        return 0

    index = select_one(ctx, t("cli.remove.promptSelect"), [_tool_label(tool) for tool in tools])
    target = tools[index]
    if not confirm(ctx, t("cli.remove.confirm", name=target.name)):
        ctx.console_awr.print(escape(t("cli.remove.cancelled")))
        return 0

    remaining = [tool for i, tool in enumerate(tools) if i != index]
    ctx.store.save(config.model_copy(update={"cli": remaining}))
    ctx.console_awr.success(t("cli.remove.success", name=target.name))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the cli sub-app with the Typer app."""
    cli_app = typer.Typer(help="Manage the CLI tools launched by `acs code`.", no_args_is_help=True)
    app.add_typer(cli_app, name="cli")

    def _run(body, verbose: bool, spaced: bool = True):
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: body(ctx), spaced=spaced)
        if code:
            raise typer.Exit(code=code)

    @cli_app.command("list")
    def list_(
        as_json: bool = typer.Option(False, "--json", help="Print the tools as JSON."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """List the CLI tools."""
        _run(lambda ctx: cli_list_command(ctx, as_json), verbose, spaced=not as_json)

    @cli_app.command("ls", hidden=True)
    def ls(
        as_json: bool = typer.Option(False, "--json", help="Print the tools as JSON."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Alias of list."""
        _run(lambda ctx: cli_list_command(ctx, as_json), verbose, spaced=not as_json)

    @cli_app.command()
    def add(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Add a CLI tool."""
        _run(cli_add_command, verbose)

    @cli_app.command()
    def edit(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Edit a CLI tool."""
        _run(cli_edit_command, verbose)

    @cli_app.command()
    def remove(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Remove a CLI tool."""
        _run(cli_remove_command, verbose)

    @cli_app.command("rm", hidden=True)
    def rm(verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")):
        """Alias of remove."""
        _run(cli_remove_command, verbose)
