"""Commands that resolve a hook to jump to.

Each prints the target path on stdout so an editor binding can open it;
``--open`` hands it to $EDITOR instead.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from ..errors import HooksError
from ._common import absolute
from ._common import fail
from ._common import get_store

open_option = click.option("--open", "-o", "open_editor", is_flag=True, help="Open the file in $EDITOR")


def _emit(path: str, open_editor: bool) -> None:
    if open_editor:
        click.edit(filename=path)
    else:
        click.echo(path)


def _step(current: str | None, open_editor: bool, pick: Callable[..., str]) -> None:
    try:
        target = pick(absolute(current) if current else None)
    except HooksError as e:
        fail(e)
    _emit(target, open_editor)


@click.command(name="jump")
@click.argument("position", type=int)
@open_option
@click.pass_context
def jump(ctx: click.Context, position: int, open_editor: bool):
    """Print (or open) the hook at POSITION."""
    store = get_store(ctx)
    try:
        path = store.jump(position)
    except HooksError as e:
        fail(e)
    _emit(path, open_editor)


@click.command(name="next")
@click.argument("current", type=click.Path(), required=False)
@open_option
@click.pass_context
def next_hook(ctx: click.Context, current: str | None, open_editor: bool):
    """Print (or open) the hook after CURRENT, wrapping around.

    Without CURRENT, or when CURRENT is not hooked, the first hook is used.
    """
    _step(current, open_editor, get_store(ctx).next)


@click.command(name="prev")
@click.argument("current", type=click.Path(), required=False)
@open_option
@click.pass_context
def prev_hook(ctx: click.Context, current: str | None, open_editor: bool):
    """Print (or open) the hook before CURRENT, wrapping around.

    Without CURRENT, or when CURRENT is not hooked, the first hook is used.
    """
    _step(current, open_editor, get_store(ctx).prev)
