"""Helpers shared by the command modules."""

import os
import sys
from typing import NoReturn

import click

from ..console import err_console
from ..errors import HooksError
from ..store import SlotStore
from ..ui import display_error


def absolute(path: str) -> str:
    """Expand ``~`` and make ``path`` absolute without resolving symlinks."""
    return os.path.abspath(os.path.expanduser(path))


def get_store(ctx: click.Context) -> SlotStore:
    store = ctx.find_object(SlotStore)
    if store is None:
        raise click.UsageError("hooks store not initialized")
    return store


def fail(error: HooksError) -> NoReturn:
    """Report a failed operation and exit with status 1."""
    display_error(err_console, error)
    sys.exit(1)
