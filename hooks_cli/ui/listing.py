"""Table rendering for the current hook list."""

from rich.table import Table


def render_hooks_table(paths: list[str], context: str, current: str | None = None) -> Table:
    """Build a table of hooks, highlighting ``current`` if it is hooked."""
    table = Table(title=f"Hooks ({context})", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="green")
    table.add_column("Path")

    for position, path in enumerate(paths, start=1):
        style = "bold" if path == current else None
        table.add_row(str(position), path, style=style)

    return table
