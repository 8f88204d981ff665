"""
Minimal publish/subscribe channel used to open the demo modal from anywhere
on the page (hero button, pricing table, nav bar, ...).
"""

from collections import defaultdict
from typing import Callable, DefaultDict, List

from demo_booking.utils.logger import get_logger

logger = get_logger(__name__)

OPEN_DEMO_MODAL = "open-demo-modal"

Handler = Callable[[], None]


class EventBus:
    """Named events without payloads. One instance is shared by injection."""

    def __init__(self):
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> None:
        if handler not in self._handlers[event]:
            self._handlers[event].append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        if handler in self._handlers.get(event, []):
            self._handlers[event].remove(handler)

    def publish(self, event: str) -> int:
        """Call every handler for ``event``; returns how many were called."""
        handlers = list(self._handlers.get(event, []))
        logger.debug(f"Publishing {event} to {len(handlers)} handler(s)")
        for handler in handlers:
            handler()
        return len(handlers)
