# acs/commands/ui.py

import errno
import webbrowser

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded
from acs.ui.server import DEFAULT_HOST, DEFAULT_PORT, AdminServer

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def open_browser(ctx: CommandContext, url: str) -> None:
    ctx.console_awr.print(f"[dim]{escape(ctx.t('ui.server.opening', url=url))}[/]")
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        ctx.console_awr.warn(ctx.t("ui.server.openFailed", message=str(e), url=url))
        return
    if not opened:
        ctx.console_awr.warn(ctx.t("ui.server.openFailed", message="no browser available", url=url))


def ui_command(ctx: CommandContext, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, open_page: bool = True) -> int:
    """Start the admin server and serve until interrupted."""
    t = ctx.t
    if not 0 <= port <= 65535:
        ctx.console_awr.error(t("ui.server.invalidPort", port=port))
        return 1

    try:
        server = AdminServer(host, port, home=ctx.store.home, console=ctx.console, verbose=ctx.verbose)
    except OSError as e:
        if e.errno == errno.EADDRINUSE:
            ctx.console_awr.error(t("ui.server.portInUse", port=port))
        else:
            ctx.console_awr.error(t("ui.server.failed", message=str(e)))
        return 1

    with server:
        ctx.console_awr.success(t("ui.server.running", url=server.url))
        ctx.console_awr.print(f"[dim]{escape(t('ui.server.stopHint'))}[/]")
        if open_page:
            open_browser(ctx, server.url)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            ctx.console_awr.print("")
            ctx.console_awr.print(escape(t("ui.server.stopped")))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the ui command with the Typer app."""

    @app.command()
    def ui(
        host: str = typer.Option(DEFAULT_HOST, "--host", help="Address to bind."),
        port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to listen on (0 picks a free one)."),
        open_page: bool = typer.Option(True, "--open/--no-open", help="Open the admin page in a browser."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Start the local admin web UI."""
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: ui_command(ctx, host, port, open_page))
        if code:
            raise typer.Exit(code=code)
