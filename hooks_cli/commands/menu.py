"""Bulk editor for the hook list.

Opens the rendered list in $EDITOR. Saving commits the edit if every line
is valid; otherwise the failing lines are shown and the user may edit again.
"""

from __future__ import annotations

import sys

import click

from .. import menu as menu_codec
from ..console import console
from ..console import err_console
from ..errors import HooksError
from ..errors import ValidationError
from ..ui import display_error
from ..ui import display_menu_errors
from ._common import fail
from ._common import get_store


@click.command(name="menu")
@click.option(
    "--from-file",
    "-f",
    "source",
    type=click.File("r"),
    help="Apply edited lines from a file ('-' for stdin) instead of opening $EDITOR",
)
@click.pass_context
def menu(ctx: click.Context, source):
    """Edit all hooks at once as '[n] = path' lines."""
    store = get_store(ctx)
    context = store.context()

    if source is not None:
        lines = menu_codec.split_text(source.read())
        _commit_or_exit(store, lines, context)
        return

    try:
        text = "\n".join(menu_codec.render(store.load(context))) + "\n"
    except HooksError as e:
        fail(e)

    while True:
        edited = click.edit(text, extension=".hooks", require_save=True)
        if edited is None:
            console.print("[dim]Hooks menu closed without changes[/dim]")
            return

        lines = menu_codec.split_text(edited)
        try:
            slots = menu_codec.commit(store, lines, context)
        except ValidationError as e:
            display_menu_errors(err_console, lines, e.lines)
            if not click.confirm("Edit again?", default=True, err=True):
                display_error(err_console, e)
                sys.exit(1)
            text = edited
            continue
        except HooksError as e:
            fail(e)

        console.print(f"[green]✓[/green] Hooks: State saved! ({len(slots)} hooks)")
        return


def _commit_or_exit(store, lines: list[str], context: str) -> None:
    try:
        slots = menu_codec.commit(store, lines, context)
    except ValidationError as e:
        display_menu_errors(err_console, lines, e.lines)
        fail(e)
    except HooksError as e:
        fail(e)
    console.print(f"[green]✓[/green] Hooks: State saved! ({len(slots)} hooks)")
