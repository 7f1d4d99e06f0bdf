"""
Status reporting for hook operations.

The installer describes every decision it makes as a single status line.
The exact wording of those lines is stable so other tooling can match on it.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.markup import escape


class Reporter(Protocol):
    """Receives human-readable status lines."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleReporter:
    """Reporter that prints to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]", highlight=False)
