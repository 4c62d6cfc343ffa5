# acs/cli.py
"""
Main CLI entry point for acs.

This module sets up the Typer application and registers all commands.
"""
import importlib.metadata

import typer
from rich.console import Console

from acs.commands import (
    add,
    cli_tools,
    code,
    config,
    edit,
    lang,
    list_projects,
    remove,
    rules,
    ui,
)

app = typer.Typer(
    name="acs",
    help="acs - jump into your projects and launch AI coding CLIs",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
list_projects.register(app)
add.register(app)
edit.register(app)
remove.register(app)
code.register(app)
cli_tools.register(app)
rules.register(app)
config.register(app)
lang.register(app)
ui.register(app)


def get_package_version() -> str:
    try:
        return importlib.metadata.version("acs")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool):
    if value:
        console = Console(log_path=False)
        console.print(f"[bold green]acs[/] version [cyan]{get_package_version()}[/]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version of acs and exit.",
        callback=_version_callback,
        is_eager=True,
    )
):
    """
    acs CLI.
    """
    pass


if __name__ == "__main__":
    app()
