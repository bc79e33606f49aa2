"""hooks - per-project file bookmarks for editors and shells."""

import logging
from pathlib import Path

import click

from .commands._common import fail
from .commands.menu import menu
from .commands.navigate import jump
from .commands.navigate import next_hook
from .commands.navigate import prev_hook
from .commands.slots import add
from .commands.slots import list_hooks
from .commands.slots import move_left
from .commands.slots import move_right
from .commands.slots import remove
from .commands.slots import remove_current
from .commands.slots import where
from .context import GLOBAL_CONTEXT
from .context import GitContextResolver
from .context import StaticContextResolver
from .errors import HooksError
from .events import EventBus
from .events import HooksChanged
from .logging_setup import init_json_logging
from .settings import load_settings
from .store import SlotStore

logger = logging.getLogger(__name__)


def _log_change(event: HooksChanged) -> None:
    logger.info(f"Hooks changed for {event.context!r}", extra={"event": event.type, "count": event.count})


def build_store(data_dir: Path, use_global: bool) -> SlotStore:
    """Create the store for this invocation.

    Args:
        data_dir: Directory holding one state file per context
        use_global: Skip git detection and always use the global context
    """
    resolver = StaticContextResolver(GLOBAL_CONTEXT) if use_global else GitContextResolver()
    bus = EventBus()
    bus.subscribe(_log_change)
    return SlotStore(base_dir=data_dir, resolver=resolver, event_bus=bus)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for hook state (default: ~/.hooks/data)",
)
@click.option("--global", "-g", "use_global", is_flag=True, help="Use the global context instead of the git repository")
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: ~/.hooks/settings.yaml)",
)
@click.version_option(package_name="hooks-cli")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, use_global: bool, settings_file: Path | None):
    """Keep a short ordered list of files per project and jump between them."""
    settings = load_settings(settings_file)
    if settings.log_path is not None:
        init_json_logging(settings.log_path, settings.log_level)

    use_global = use_global or settings.context == "global"
    try:
        ctx.obj = build_store(data_dir or settings.data_dir, use_global)
    except HooksError as e:
        fail(e)


for command in (add, remove, remove_current, move_left, move_right, list_hooks, where, jump, next_hook, prev_hook, menu):
    cli.add_command(command)


def main() -> None:
    """Entry point for the ``hooks`` console script."""
    cli()


if __name__ == "__main__":
    main()
