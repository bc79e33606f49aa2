"""Commands that change or show the hook list."""

from __future__ import annotations

import click
from rich.markup import escape

from ..console import console
from ..errors import HooksError
from ..ui import render_hooks_table
from ._common import absolute
from ._common import fail
from ._common import get_store


@click.command(name="add")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--start", "-s", "at_start", is_flag=True, help="Insert at position 1, pushing the rest up")
@click.option("--at", "-a", "position", type=int, help="Insert at POSITION, pushing later hooks up")
@click.pass_context
def add(ctx: click.Context, path: str, at_start: bool, position: int | None):
    """Hook PATH (appended at the end by default)."""
    if at_start and position is not None:
        raise click.UsageError("--start and --at are mutually exclusive")

    store = get_store(ctx)
    path = absolute(path)
    try:
        if at_start:
            used = store.add_at_start(path)
        elif position is not None:
            used = store.insert_at(path, position)
        else:
            used = store.add_at_end(path)
    except HooksError as e:
        fail(e)

    verb = "added" if position is None and not at_start else "inserted"
    console.print(f"[green]✓[/green] Hooks: {escape(path)} {verb} at \\[{used}]", soft_wrap=True)


@click.command(name="remove")
@click.argument("position", type=int)
@click.pass_context
def remove(ctx: click.Context, position: int):
    """Remove the hook at POSITION; later hooks move down."""
    store = get_store(ctx)
    try:
        path = store.remove_at(position)
    except HooksError as e:
        fail(e)
    console.print(f"[green]✓[/green] Hooks: Removed \\[{position}] {escape(path)}", soft_wrap=True)


@click.command(name="remove-current")
@click.argument("path", type=click.Path())
@click.pass_context
def remove_current(ctx: click.Context, path: str):
    """Remove PATH (usually the file open in the editor) from the hooks."""
    store = get_store(ctx)
    try:
        position = store.remove_by_path(absolute(path))
    except HooksError as e:
        fail(e)
    console.print(f"[green]✓[/green] Hooks: Removed \\[{position}]")


@click.command(name="left")
@click.argument("path", type=click.Path())
@click.pass_context
def move_left(ctx: click.Context, path: str):
    """Swap PATH with the hook before it."""
    store = get_store(ctx)
    try:
        old, new = store.move_left(absolute(path))
    except HooksError as e:
        fail(e)
    console.print(f"[green]✓[/green] Hooks: Moved \\[{old}] <-> \\[{new}]")


@click.command(name="right")
@click.argument("path", type=click.Path())
@click.pass_context
def move_right(ctx: click.Context, path: str):
    """Swap PATH with the hook after it."""
    store = get_store(ctx)
    try:
        old, new = store.move_right(absolute(path))
    except HooksError as e:
        fail(e)
    console.print(f"[green]✓[/green] Hooks: Moved \\[{old}] <-> \\[{new}]")


@click.command(name="list")
@click.option("--plain", is_flag=True, help="Print one path per line")
@click.option("--current", "-c", type=click.Path(), help="Highlight this file if hooked")
@click.pass_context
def list_hooks(ctx: click.Context, plain: bool, current: str | None):
    """Show the hooks for the current context."""
    store = get_store(ctx)
    context = store.context()
    try:
        slots = store.load(context)
    except HooksError as e:
        fail(e)

    if plain:
        for path in slots:
            click.echo(path)
        return

    if not len(slots):
        console.print(f"[yellow]No hooks for {escape(context)}[/yellow]", soft_wrap=True)
        return

    console.print(render_hooks_table(slots.paths, context, absolute(current) if current else None))


@click.command(name="where")
@click.pass_context
def where(ctx: click.Context):
    """Show the active context and its state file."""
    store = get_store(ctx)
    context = store.context()
    console.print(f"[bold]Context:[/bold] {escape(context)}", soft_wrap=True)
    console.print(f"[bold]State file:[/bold] {escape(str(store.path_for(context)))}", soft_wrap=True)
