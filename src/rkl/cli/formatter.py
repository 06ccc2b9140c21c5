# src/rkl/cli/formatter.py
from typing import Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rkl.core.models import PodRecord

# Shared console for operator-facing output
console = Console()


class PodFormatter:
    """
    Renders candidate menus, command output and errors.
    Nothing here decides anything; it only draws.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def print_header(self, subtitle: str):
        self.console.print(Panel.fit(
            "[bold cyan]rkl[/bold cyan] - fuzzy pod targeting for kubectl",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def show_candidates(self, labelled: Iterable[Tuple[str, PodRecord]]):
        """One row per lettered candidate, plus the reserved 'apply to all' row."""
        table = Table(show_header=True, header_style="bold magenta", box=None)
        table.add_column("", style="bold yellow")
        table.add_column("Name", style="cyan")
        table.add_column("Ready")
        table.add_column("Status")
        table.add_column("Restarts", justify="right")
        table.add_column("Age", style="dim")
        table.add_column("Node", style="dim")

        for label, pod in labelled:
            status_color = "green" if pod.status == "Running" else "yellow"
            table.add_row(
                f"{label}:", pod.name, pod.ready,
                f"[{status_color}]{pod.status}[/{status_color}]",
                pod.restarts, pod.age, pod.node
            )
        table.add_row("z:", "[bold]apply to all[/bold]", "", "", "", "", "")
        self.console.print(table)

    def print_output(self, outputs: Sequence[str]):
        """Command output is printed verbatim; it may contain '[' that rich would eat."""
        text = "\n".join(o.rstrip("\n") for o in outputs if o)
        if text:
            self.console.out(text, highlight=False)

    def print_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
