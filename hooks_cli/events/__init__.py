"""Change notifications for hook lists."""

from hooks_cli.events.bus import EventBus
from hooks_cli.events.schemas import HooksChanged

__all__ = [
    "EventBus",
    "HooksChanged",
]
