"""
Event bus between the controller and the page.

Only two events travel on it:

    LIGHT_CHANGED  → data: LightState (after any brightness/saturation/hue change)
    PANEL_TOGGLED  → data: bool (new overlay visibility)

A subscriber that raises is logged and the remaining subscribers still run.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List

import showlog


LIGHT_CHANGED = "light_changed"
PANEL_TOGGLED = "panel_toggled"
EVENT_TYPES = (LIGHT_CHANGED, PANEL_TOGGLED)

Handler = Callable[[Any], None]


def _check_event(event_type: str) -> None:
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Unknown event type: {event_type!r}")


class EventBus:
    """Publish/subscribe for LIGHT_CHANGED and PANEL_TOGGLED."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Handler) -> Callable[[], None]:
        """
        Register handler for event_type.

        Returns a function that removes the handler again. Calling it more
        than once is harmless.
        """
        _check_event(event_type)
        handlers = self._handlers[event_type]
        handlers.append(handler)
        showlog.debug(f"[EVENT_BUS] Subscribed to '{event_type}'")

        def _remove() -> None:
            if handler in handlers:
                handlers.remove(handler)
                showlog.debug(f"[EVENT_BUS] Unsubscribed from '{event_type}'")
        return _remove

    def publish(self, event_type: str, data: Any = None) -> None:
        _check_event(event_type)
        handlers = tuple(self._handlers.get(event_type, ()))
        if not handlers:
            return
        showlog.verbose(f"[EVENT_BUS] Publishing '{event_type}' to {len(handlers)} subscribers")
        for handler in handlers:
            try:
                handler(data)
            except Exception as e:
                showlog.error(f"[EVENT_BUS] Error in subscriber for '{event_type}'", exc=e)

    def clear(self) -> None:
        """Drop every subscriber."""
        for handlers in self._handlers.values():
            handlers.clear()
