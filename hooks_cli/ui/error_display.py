"""Clean error display for hook operations."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..errors import BoundaryError
from ..errors import DuplicateError
from ..errors import EmptyListError
from ..errors import HooksError
from ..errors import NotFoundError
from ..errors import SlotIndexError

# User-level conditions: the list is fine, the request just doesn't apply.
_WARNINGS = (DuplicateError, SlotIndexError, NotFoundError, BoundaryError, EmptyListError)


def display_error(console: Console, error: HooksError) -> None:
    """Print a one-line message for a failed hook operation."""
    message = escape(error.message)
    if isinstance(error, _WARNINGS):
        console.print(f"[yellow]Hooks:[/yellow] {message}", soft_wrap=True)
    else:
        console.print(f"[red]Hooks error:[/red] {message}", soft_wrap=True)


def display_menu_errors(console: Console, lines: list[str], error_lines: list[int]) -> None:
    """Show every edited line, marking the ones that failed validation."""
    failed = set(error_lines)

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(justify="right", style="dim")
    table.add_column()
    table.add_column()

    for number, line in enumerate(lines, start=1):
        if number in failed:
            table.add_row(str(number), f"[red]{escape(line)}[/red]", "[bold red]X[/bold red]")
        else:
            table.add_row(str(number), escape(line), "")

    console.print(
        Panel(
            table,
            title="[red]Hooks menu not saved[/red]",
            subtitle=escape("Ensure syntax is correct ([<key>] = <valid fp>), and that the file exists"),
            border_style="red",
        )
    )
