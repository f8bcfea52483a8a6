from typing import Optional, Protocol

from rich.console import Console
from rich.table import Table

from registration.views import StepView


class Printer(Protocol):
    def __call__(self, view: StepView) -> None: ...


class ConsolePrinter:
    """Prints the confirmation as a table on a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def __call__(self, view: StepView) -> None:
        table = Table(title=view.title, caption=view.footer, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        for label, value in view.rows:
            table.add_row(f"{label}:", value)

        if view.message:
            self.console.print(f"[green]{view.message}[/green]")
        self.console.print(table)
