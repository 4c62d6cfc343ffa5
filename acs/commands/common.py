# acs/commands/common.py

"""
Helpers shared by the acs commands: the per-invocation context, the error
boundary every command runs inside, and the interactive selection prompts.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from acs.core.config_store import ConfigStore
from acs.core.console import ConsoleAware
from acs.core.exceptions import AcsError, ProjectPathError
from acs.core.i18n import Translator, describe_error, resolve_language
from acs.core.paths import resolve_project_dir


@dataclass
class CommandContext:
    console_awr: ConsoleAware
    store: ConfigStore
    t: Translator
    verbose: bool = False

    @property
    def console(self) -> Console:
        return self.console_awr.console  # type: ignore


def create_context(verbose: bool = False) -> CommandContext:
    """Build the console, store and translator for one command run."""
    console = Console(log_path=False, soft_wrap=True)
    store = ConfigStore(console=console, verbose=verbose)
    t = Translator(resolve_language(store.config_file))
    return CommandContext(
        console_awr=ConsoleAware(console=console, verbose=verbose),
        store=store,
        t=t,
        verbose=verbose,
    )

# ==============================================================
# ERROR BOUNDARY
# ==============================================================

def run_guarded(ctx: CommandContext, body: Callable[[], Optional[int]], spaced: bool = True) -> int:
    """
    Run a command body and turn failures into a message plus exit code 1.
    With ``spaced=False`` no blank lines surround the output (machine-readable
    output such as --json).
    """
    console_awr = ctx.console_awr
    try:
        if spaced:
            console_awr.print("")
        code = body() or 0
        if spaced:
            console_awr.print("")
        return code

    except (KeyboardInterrupt, EOFError):
        console_awr.print("")
        console_awr.warn(ctx.t("errors.cancelled"))
        console_awr.print("")
        return 1

    except AcsError as e:
        lines = describe_error(e, ctx.t, str(ctx.store.config_file))
        console_awr.print("")
        console_awr.error(lines[0])
        for line in lines[1:]:
            console_awr.print(f"   {escape(line)}")
        console_awr.print("")
        return 1

    except Exception as e:
        console_awr.print("")
        console_awr.error(ctx.t("errors.unexpected", message=str(e)))
        if ctx.verbose:
            ctx.console.print_exception()
        console_awr.print("")
        return 1

# ==============================================================
# PROMPTS
# ==============================================================

def print_choices(ctx: CommandContext, title: str, labels: Sequence[str]) -> None:
    ctx.console_awr.print(f"[bold cyan]{escape(title)}[/]")
    for index, label in enumerate(labels, start=1):
        ctx.console_awr.print(f"  [bold]{index}.[/] {label}")


def select_one(ctx: CommandContext, title: str, labels: Sequence[str], disabled: Sequence[int] = ()) -> int:
    """Show a numbered list and return the zero-based index picked by the user."""
    print_choices(ctx, title, labels)
    choices = [str(i) for i in range(1, len(labels) + 1) if (i - 1) not in disabled]
    answer = Prompt.ask(
        "❯",
        choices=choices,
        show_choices=False,
        console=ctx.console,
    )
    return int(answer) - 1


def select_many(ctx: CommandContext, title: str, labels: Sequence[str]) -> List[int]:
    """Like select_one, but accepts several comma-separated numbers; may be empty."""
    print_choices(ctx, title, labels)
    while True:
        answer = Prompt.ask(f"❯ [dim]{escape(ctx.t('select.multiHint'))}[/]", default="", console=ctx.console)
        parts = [part for part in answer.replace(" ", ",").split(",") if part]
        try:
            picked = sorted({int(part) - 1 for part in parts})
        except ValueError:
            picked = None
        if picked is not None and all(0 <= index < len(labels) for index in picked):
            return picked
        ctx.console_awr.print(f"[red]{escape(ctx.t('select.invalid'))}[/]")


def confirm(ctx: CommandContext, question: str, default: bool = False) -> bool:
    return Confirm.ask(escape(question), default=default, console=ctx.console)


def ask_text(ctx: CommandContext, question: str, default: Optional[str] = None, error_key: Optional[str] = None) -> str:
    """Ask for a non-empty, stripped string."""
    while True:
        if default is None:
            answer = Prompt.ask(escape(question), console=ctx.console)
        else:
            answer = Prompt.ask(escape(question), default=default, console=ctx.console)
        if answer and answer.strip():
            return answer.strip()
        if error_key:
            ctx.console_awr.print(f"[red]{escape(ctx.t(error_key))}[/]")


def ask_project_dir(ctx: CommandContext, question: str, default: Optional[str] = None) -> str:
    """Ask for a project path until it names an existing directory; return it normalized."""
    while True:
        answer = ask_text(ctx, question, default=default)
        try:
            return resolve_project_dir(answer)
        except ProjectPathError as e:
            ctx.console_awr.print(f"[red]{escape(describe_error(e, ctx.t)[0])}[/]")
