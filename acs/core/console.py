from typing import Optional, Protocol, Any

from rich.markup import escape

class Console(Protocol):
    """Abstract interface for console output."""
    def print(self, *objects: Any, **kwargs: Any) -> None:
        ...

    def log(self, *objects: Any, **kwargs: Any) -> None:
        ...

class ConsoleAware:
    """Base class for classes that need console output functionality."""
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def print(self, msg: str) -> None:
        if self.console:
            self.console.print(msg)

    def log(self, msg: str) -> None:
        if self.console and self.verbose:
            self.console.log(msg)

    def success(self, msg: str) -> None:
        self.print(f"[bold green]✔[/] [green]{escape(msg)}[/]")

    def warn(self, msg: str) -> None:
        self.print(f"[bold yellow]⚠️  {escape(msg)}[/]")

    def error(self, msg: str) -> None:
        self.print(f"[bold red]❌ {escape(msg)}[/]")
