"""
console.py

Responsibility: operator-facing status output.

Messages are leveled and colored with rich; nothing here is a machine-readable
format. Diagnostics that are not meant for the operator go through `logging`.
"""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.markup import escape


class Console:
    def __init__(self, *, debug: bool = False, rich_console: RichConsole | None = None) -> None:
        self._out = rich_console or RichConsole(highlight=False)
        self._debug = debug

    def step(self, message: str) -> None:
        self._out.print(f"[cyan]>>[/cyan] {escape(message)}")

    def ok(self, message: str) -> None:
        self._out.print(f"[green]OK[/green] {escape(message)}")

    def info(self, message: str) -> None:
        self._out.print(escape(message))

    def warn(self, message: str) -> None:
        self._out.print(f"[yellow]WARNING[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self._out.print(f"[bold red]ERROR[/bold red] {escape(message)}")

    def debug(self, message: str) -> None:
        if self._debug:
            self._out.print(f"[dim]{escape(message)}[/dim]")

    def wait_for_key(self, _exit_code: int = 0) -> None:
        """Post-run hook: hold the window open until the operator presses Enter."""
        try:
            self._out.input("[dim]Press Enter to continue...[/dim]")
        except EOFError:
            pass
