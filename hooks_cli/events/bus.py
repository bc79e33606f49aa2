"""Event bus for hook list change notifications."""

import logging
from collections.abc import Callable

from hooks_cli.events.schemas import HooksChanged

logger = logging.getLogger(__name__)


class EventBus:
    """Simple fire-and-forget event bus.

    Subscribers are called synchronously. Errors in handlers are isolated
    and logged so a failing observer never undoes a completed save.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[HooksChanged], None]] = []

    def subscribe(self, handler: Callable[[HooksChanged], None]) -> None:
        """Subscribe a handler to receive all hook events.

        Args:
            handler: Callable that takes the published event
        """
        self._subscribers.append(handler)

    def unsubscribe(self, handler: Callable[[HooksChanged], None]) -> None:
        """Remove a previously subscribed handler, if present."""
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def publish(self, event: HooksChanged) -> None:
        """Publish an event to all subscribers.

        Args:
            event: Event to publish
        """
        for handler in list(self._subscribers):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler {getattr(handler, '__name__', handler)!r}")
